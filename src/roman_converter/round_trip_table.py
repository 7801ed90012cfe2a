"""Build a round-trip table over the supported range of values.

Every integer in the range is encoded to Roman and decoded back. The table is
a quick self-check of the converter and a handy reference listing.
"""
from pathlib import Path

import pandas as pd

from .common.config import MAX_VALUE, MIN_VALUE
from .common.exceptions import RangeError, RomanNumeralError
from .common.progress import ProgressPrinter
from .common.roman_numerals import from_roman, to_roman
from .common.validators import validate_output_directory


def build_round_trip_table(start: int = MIN_VALUE, stop: int = MAX_VALUE) -> pd.DataFrame:
    """Encode and decode every integer from start to stop (inclusive).

    Args:
        start: First value of the table
        stop: Last value of the table

    Returns:
        DataFrame with columns arabic, roman, decoded and round_trip_ok.
        decoded is -1 where the Roman form could not be decoded.

    Raises:
        RangeError: If start > stop or either bound is outside the
                   supported range
    """
    if start > stop:
        raise RangeError(f"Start {start} is greater than stop {stop}", start)
    if start < MIN_VALUE or stop > MAX_VALUE:
        raise RangeError(
            f"Table range {start}-{stop} is outside {MIN_VALUE}-{MAX_VALUE}",
            (start, stop),
        )

    rows = []
    progress = ProgressPrinter("Building round-trip table", stop - start + 1, step=500)

    for i, arabic in enumerate(range(start, stop + 1)):
        progress.update(i + 1)
        roman = to_roman(arabic)
        try:
            decoded = from_roman(roman)
        except RomanNumeralError:
            decoded = -1
        rows.append({
            'arabic': arabic,
            'roman': roman,
            'decoded': decoded,
            'round_trip_ok': decoded == arabic,
        })

    progress.done()

    return pd.DataFrame(rows, columns=['arabic', 'roman', 'decoded', 'round_trip_ok'])


def format_round_trip_lines(table: pd.DataFrame) -> list[str]:
    """Format each row as "n -> roman" followed by "roman -> decoded"."""
    lines = []
    for row in table.itertuples(index=False):
        lines.append(f"{row.arabic} -> {row.roman}")
        lines.append(f"{row.roman} -> {row.decoded}")
    return lines


def write_round_trip_table(output_csv: str, start: int = MIN_VALUE, stop: int = MAX_VALUE) -> str:
    """Build the round-trip table and save it as CSV.

    Args:
        output_csv: Path of the CSV file to write
        start: First value of the table
        stop: Last value of the table

    Returns:
        str: Path to the written CSV file
    """
    output_path = Path(output_csv)
    validate_output_directory(output_path, "Round-trip table")

    table = build_round_trip_table(start, stop)

    table.to_csv(output_path, index=False)

    failures = int((~table['round_trip_ok']).sum())
    print(f"Wrote {len(table)} rows to {output_path}")
    if failures:
        print(f"Warning: {failures} values did not survive the round trip")

    return str(output_path)
