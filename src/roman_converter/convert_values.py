"""Convert a batch of raw tokens between Arabic and Roman numerals.

Each token is classified on its own: a token made only of Roman letters is
decoded, a token made only of digits is encoded, anything else is reported as
invalid input. A failing token is recorded and the batch carries on.
"""
from typing import Iterable

from .common.config import MAX_VALUE, MIN_VALUE
from .common.exceptions import EmptyInputError, RangeError, RomanNumeralError
from .common.results import ConversionResult
from .common.roman_numerals import (
    from_roman,
    is_valid_arabic_digits,
    is_valid_roman,
    to_roman,
)


def parse_arabic(digits: str) -> int:
    """Parse a string of ASCII digits, refusing values too long to encode.

    The length is checked before calling int(), so a token of thousands of
    digits is reported as out of range instead of hitting the interpreter's
    integer string conversion limit.

    Args:
        digits: String accepted by is_valid_arabic_digits (leading zeros allowed)

    Returns:
        int: The parsed value

    Raises:
        RangeError: If the value has more digits than MAX_VALUE
    """
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(MAX_VALUE)):
        shown = significant if len(significant) <= 20 else f"{significant[:20]}..."
        raise RangeError(
            f"Number out of range: {shown} (must be between {MIN_VALUE} and {MAX_VALUE})",
            digits,
        )
    return int(significant)


def convert_token(token: str) -> ConversionResult:
    """Convert one token in whichever direction it calls for.

    Args:
        token: Raw input, e.g. a command line argument ("1994", "xiv")

    Returns:
        ConversionResult with either result or error set
    """
    raw = token.strip()
    source = raw.upper()

    # Both classifiers accept "", so the empty case is decided first
    if not raw:
        direction = None
    elif is_valid_roman(raw):
        direction = "from_roman"
    elif is_valid_arabic_digits(raw):
        direction = "to_roman"
    else:
        direction = None

    try:
        if not raw:
            raise EmptyInputError("Value cannot be empty", token)
        if direction == "from_roman":
            result = str(from_roman(raw))
        elif direction == "to_roman":
            result = to_roman(parse_arabic(raw))
        else:
            raise RomanNumeralError(f"Invalid input: {source}", token)
    except RomanNumeralError as e:
        return ConversionResult(source=source, direction=direction, error=str(e))

    return ConversionResult(source=source, direction=direction, result=result)


def convert_values(tokens: Iterable[str]) -> list[ConversionResult]:
    """Convert every token, keeping going past failures.

    Args:
        tokens: Raw inputs, e.g. the command line arguments

    Returns:
        list[ConversionResult]: One result per token, in input order

    Example:
        >>> [r.result for r in convert_values(["1994", "XIV"])]
        ['MCMXCIV', '14']
    """
    return [convert_token(token) for token in tokens]


def format_result(result: ConversionResult) -> str:
    """Format a result as "source -> result" or "Error: message".

    Numbers are shown as parsed, so "0042" prints as "42 -> XLII".
    """
    if not result.ok:
        return f"Error: {result.error}"
    if result.direction == "to_roman":
        return f"{parse_arabic(result.source)} -> {result.result}"
    return f"{result.source} -> {result.result}"
