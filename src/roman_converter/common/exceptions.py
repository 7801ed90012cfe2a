"""Error types raised by the numeral converter.

Every error describes a problem with the caller's input. They all derive from
ValueError, so code that already guards conversions with ``except ValueError``
keeps working.
"""


class RomanNumeralError(ValueError):
    """Base class for conversion errors.

    Attributes:
        value: The offending input (integer or string)
    """

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value


class RangeError(RomanNumeralError):
    """Numeric argument is outside the supported encoding range."""


class EmptyInputError(RomanNumeralError):
    """Empty string passed for decoding."""


class InvalidNumeralError(RomanNumeralError):
    """Illegal character, or a Roman numeral that is not in canonical form."""
