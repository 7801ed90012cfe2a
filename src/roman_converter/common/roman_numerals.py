"""Roman numeral conversion for the roman converter package.

This module provides bidirectional conversion between Roman numerals and
integers. Encoding is a greedy walk over a fixed symbol table; decoding sums
glyph values and then validates the result by re-encoding it, so only
canonical numerals (the form the encoder produces) are accepted.
"""
import string
from types import MappingProxyType

from .config import MAX_VALUE, MIN_VALUE
from .exceptions import EmptyInputError, InvalidNumeralError, RangeError


# Roman numerals in descending order of value, subtractive pairs included
SYMBOL_TABLE = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

# Lookup by glyph, for both single letters and two-letter subtractive pairs
GLYPH_VALUES = MappingProxyType({glyph: value for value, glyph in SYMBOL_TABLE})

ROMAN_GLYPHS = frozenset("IVXLCDM")

# Glyphs accepted on input, either case
_INPUT_GLYPHS = ROMAN_GLYPHS | frozenset(glyph.lower() for glyph in ROMAN_GLYPHS)

_ASCII_DIGITS = frozenset(string.digits)


def to_roman(value: int, max_value: int = MAX_VALUE) -> str:
    """Convert an integer to an uppercase Roman numeral string.

    Walks the symbol table from the largest value down, appending each glyph
    for as long as its value still fits into the remaining amount.

    Args:
        value: Integer to convert
        max_value: Largest accepted value (defaults to the configured maximum)

    Returns:
        Uppercase Roman numeral string in canonical form

    Raises:
        RangeError: If value is not an integer in [MIN_VALUE, max_value]

    Examples:
        >>> to_roman(14)
        'XIV'
        >>> to_roman(1994)
        'MCMXCIV'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise RangeError(f"Expected an integer, got {type(value).__name__}", value)
    if value < MIN_VALUE or value > max_value:
        raise RangeError(
            f"Number out of range: {value} (must be between {MIN_VALUE} and {max_value})",
            value,
        )

    result = []
    remaining = value
    for arabic, glyph in SYMBOL_TABLE:
        while arabic <= remaining:
            result.append(glyph)
            remaining -= arabic

    return "".join(result)


def from_roman(text: str, max_value: int = MAX_VALUE) -> int:
    """Convert a Roman numeral string to an integer.

    Input is case-insensitive. At each position a two-letter subtractive pair
    (IV, IX, XL, XC, CD, CM) takes precedence over the single letter. The sum
    is then re-encoded with to_roman and must reproduce the input exactly,
    which rejects forms such as "IIII", "VX" or "IC".

    Args:
        text: Roman numeral string (e.g., "XIV", "mcmxciv")
        max_value: Largest accepted value (defaults to the configured maximum)

    Returns:
        Integer value of the numeral

    Raises:
        EmptyInputError: If text is empty
        InvalidNumeralError: If text contains a non-Roman character or is not
            a canonical Roman numeral

    Examples:
        >>> from_roman("XIV")
        14
        >>> from_roman("iv")
        4
    """
    if not text:
        raise EmptyInputError("Value cannot be empty", text)

    # Raw characters, before upper() can fold non-ASCII letters into Latin ones
    if not is_valid_roman(text):
        raise InvalidNumeralError(f"Invalid Roman numeral: {text.upper()}", text)

    roman = text.upper()

    total = 0
    i = 0
    while i < len(roman):
        pair_value = GLYPH_VALUES.get(roman[i:i + 2]) if i + 1 < len(roman) else None
        if pair_value:
            total += pair_value
            i += 2
        else:
            total += GLYPH_VALUES[roman[i]]
            i += 1

    try:
        canonical = to_roman(total, max_value=max_value)
    except RangeError as e:
        raise InvalidNumeralError(f"Invalid Roman numeral: {roman}", text) from e

    if canonical != roman:
        raise InvalidNumeralError(f"Invalid Roman numeral: {roman}", text)

    return total


def is_valid_roman(text: str) -> bool:
    """Return True if every character of text is a Roman glyph (any case).

    Only the ASCII letters IVXLCDM and ivxlcdm count; characters that merely
    uppercase to one of them (such as the Turkish dotless i) do not.
    """
    return all(char in _INPUT_GLYPHS for char in text)


def is_valid_arabic_digits(text: str) -> bool:
    """Return True if every character of text is an ASCII digit."""
    return all(char in _ASCII_DIGITS for char in text)
