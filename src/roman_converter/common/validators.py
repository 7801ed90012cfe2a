"""Validation utilities for the roman converter package.

This module provides the input checks shared by the batch tools, so that a
bad path or a missing column fails early with a readable message.
"""
from pathlib import Path

import pandas as pd


def validate_csv_file(path: Path, name: str = "CSV file") -> None:
    """Validate that a path exists, is a file, and has .csv extension.

    Args:
        path: Path object to validate
        name: Descriptive name for the file, used in error messages
              (e.g., "Input CSV")

    Raises:
        ValueError: If path does not exist, is not a file, or doesn't
                   have a .csv extension

    Example:
        >>> from pathlib import Path
        >>> validate_csv_file(Path("./numerals.csv"), "Input CSV")
        # Raises ValueError if numerals.csv doesn't exist or isn't a CSV
    """
    if not path.is_file() or path.suffix != ".csv":
        raise ValueError(f"Error: {name} is not a valid CSV: {path}")


def validate_column(df: pd.DataFrame, column: str, name: str = "CSV file") -> None:
    """Validate that a DataFrame contains the given column.

    Used after loading a CSV so that a misspelt column name is reported
    together with the columns the file actually has.

    Args:
        df: DataFrame loaded from the file
        column: Column name that must be present
        name: Descriptive name for the file, used in error messages

    Raises:
        ValueError: If the column is missing; the message lists the
                   columns that are available

    Example:
        >>> validate_column(pd.DataFrame({"numeral": []}), "value", "input CSV")
        # Raises ValueError: ... Available columns: ['numeral']
    """
    if column not in df.columns:
        raise ValueError(
            f"Error: Column '{column}' not found in {name}. "
            f"Available columns: {list(df.columns)}"
        )


def validate_output_directory(path: Path, name: str = "Output file") -> None:
    """Validate that the parent directory of an output file exists.

    The directory is not created.

    Args:
        path: Path of the file about to be written
        name: Descriptive name for the file, used in error messages

    Raises:
        ValueError: If the parent directory does not exist
    """
    if not path.parent.is_dir():
        raise ValueError(f"Error: {name} directory does not exist: {path.parent}")
