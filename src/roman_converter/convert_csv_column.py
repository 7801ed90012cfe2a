"""Convert one column of a CSV file between Arabic and Roman numerals.

This module reads a CSV, converts every cell of the chosen column with the
same rules as the command line (digits are encoded, Roman letters decoded)
and writes a copy of the file with the results appended. Rows that fail to
convert keep their error message in a separate column instead of aborting
the whole file.
"""
from pathlib import Path
from typing import Optional

import pandas as pd

from .common.config import DEFAULT_CSV_COLUMN, ERROR_COLUMN, RESULT_COLUMN
from .common.progress import ProgressPrinter
from .common.validators import validate_column, validate_csv_file, validate_output_directory
from .convert_values import convert_token


def convert_csv_column(
    input_csv: str,
    column: str = DEFAULT_CSV_COLUMN,
    output_csv: Optional[str] = None,
) -> str:
    """Convert every value in a CSV column and save the results.

    Args:
        input_csv: Path to the CSV file to read
        column: Name of the column holding the values to convert
        output_csv: Optional output path. Defaults to "<input>_converted.csv"
                    next to the input file.

    Returns:
        str: Path to the written CSV file

    Output format:
        All original columns, plus:
        - converted: Converted value as text (empty on failure)
        - error: Error message (empty on success)

    Raises:
        ValueError: If the input is not a CSV file, the column is missing,
                   or the output directory does not exist
    """
    input_path = Path(input_csv)
    validate_csv_file(input_path, "Input CSV")

    if output_csv is None:
        output_path = input_path.with_name(f"{input_path.stem}_converted.csv")
    else:
        output_path = Path(output_csv)
    validate_output_directory(output_path, "Output CSV")

    # Read everything as text so "0042" or "IV" are not reinterpreted
    df = pd.read_csv(input_path, dtype=str, keep_default_na=False)
    validate_column(df, column, "input CSV")

    converted = []
    errors = []
    progress = ProgressPrinter("Converting rows", len(df), step=100)

    for i, value in enumerate(df[column]):
        progress.update(i + 1)
        result = convert_token(value)
        converted.append(result.result if result.ok else "")
        errors.append(result.error or "")

    progress.done()

    df[RESULT_COLUMN] = converted
    df[ERROR_COLUMN] = errors
    df.to_csv(output_path, index=False)

    failed = sum(1 for error in errors if error)
    print(f"\nConversion complete!")
    print(f"  Rows converted: {len(df) - failed}")
    print(f"  Rows failed: {failed}")
    print(f"  Output file: {output_path}")

    return str(output_path)
