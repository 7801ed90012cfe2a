"""Configuration constants for the roman converter package.

This module contains the settings shared by the converter and the batch tools:
- the supported range of Arabic values
- column names used when converting CSV files

Environment Variables:
    ROMAN_STRICT_RANGE: Set to "1" to cap the range at 3999 (standard ceiling)
"""
import os

# Supported range for Arabic -> Roman conversion
# The compatible range accepts 4000 ("MMMM"); strict mode stops at 3999
ROMAN_STRICT_RANGE = os.getenv("ROMAN_STRICT_RANGE", "0") == "1"

MIN_VALUE = 1

if ROMAN_STRICT_RANGE:
    MAX_VALUE = 3999
else:
    MAX_VALUE = 4000

# CSV batch conversion
# Column read by default, and the two columns appended to the output file
DEFAULT_CSV_COLUMN = "value"
RESULT_COLUMN = "converted"
ERROR_COLUMN = "error"
