"""
Tests for the numeral converter core

Covers:
1. Greedy encoding and the supported range
2. Decoding with subtractive pairs and case folding
3. Rejection of empty input, illegal characters and non-canonical forms
4. Round trips over the whole range
5. The two string classifiers
"""

import pytest

from roman_converter.common.exceptions import (
    EmptyInputError,
    InvalidNumeralError,
    RangeError,
    RomanNumeralError,
)
from roman_converter.common.roman_numerals import (
    GLYPH_VALUES,
    ROMAN_GLYPHS,
    SYMBOL_TABLE,
    from_roman,
    is_valid_arabic_digits,
    is_valid_roman,
    to_roman,
)

# =============================================================================
# SYMBOL TABLE
# =============================================================================


class TestSymbolTable:
    """Tests for the fixed symbol table"""

    def test_thirteen_entries(self) -> None:
        """Seven letters plus six subtractive pairs"""
        assert len(SYMBOL_TABLE) == 13

    def test_strictly_descending(self) -> None:
        """Values are strictly descending"""
        values = [value for value, _ in SYMBOL_TABLE]
        assert values == sorted(values, reverse=True)
        assert len(set(values)) == len(values)

    def test_glyph_values_read_only(self) -> None:
        """The glyph lookup cannot be modified"""
        with pytest.raises(TypeError):
            GLYPH_VALUES["IIII"] = 4  # type: ignore[index]

    def test_pairs_in_lookup(self) -> None:
        """Subtractive pairs are looked up directly"""
        assert GLYPH_VALUES["CM"] == 900
        assert GLYPH_VALUES["IV"] == 4
        assert "II" not in GLYPH_VALUES

    def test_roman_glyphs(self) -> None:
        """Only the seven Roman letters are glyphs"""
        assert ROMAN_GLYPHS == frozenset("IVXLCDM")


# =============================================================================
# ARABIC -> ROMAN
# =============================================================================


class TestToRoman:
    """Tests for to_roman"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "I"),
            (3, "III"),
            (4, "IV"),
            (9, "IX"),
            (14, "XIV"),
            (40, "XL"),
            (90, "XC"),
            (400, "CD"),
            (444, "CDXLIV"),
            (900, "CM"),
            (1994, "MCMXCIV"),
            (2024, "MMXXIV"),
            (3888, "MMMDCCCLXXXVIII"),
            (3999, "MMMCMXCIX"),
        ],
    )
    def test_known_values(self, value: int, expected: str) -> None:
        """Known values encode to their canonical form"""
        assert to_roman(value) == expected

    def test_upper_bound_4000_accepted(self) -> None:
        """4000 is accepted in the compatible range"""
        assert to_roman(4000, max_value=4000) == "MMMM"

    def test_default_range_ends_at_4000(self) -> None:
        """Without a max_value argument, 4000 encodes and 4001 does not"""
        assert to_roman(4000) == "MMMM"
        with pytest.raises(RangeError):
            to_roman(4001)

    def test_strict_range_rejects_4000(self) -> None:
        """A 3999 ceiling rejects 4000"""
        with pytest.raises(RangeError):
            to_roman(4000, max_value=3999)

    @pytest.mark.parametrize("value", [0, -1, 4001, 10_000])
    def test_out_of_range(self, value: int) -> None:
        """Values outside the range raise RangeError"""
        with pytest.raises(RangeError) as exc_info:
            to_roman(value)
        assert exc_info.value.value == value

    @pytest.mark.parametrize("value", [1.0, "12", None, True])
    def test_non_integer_rejected(self, value) -> None:
        """Non-integers (bool included) raise RangeError"""
        with pytest.raises(RangeError):
            to_roman(value)

    def test_errors_are_value_errors(self) -> None:
        """Range errors can be caught as ValueError"""
        with pytest.raises(ValueError):
            to_roman(0)


# =============================================================================
# ROMAN -> ARABIC
# =============================================================================


class TestFromRoman:
    """Tests for from_roman"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("I", 1),
            ("IV", 4),
            ("IX", 9),
            ("XIV", 14),
            ("XLII", 42),
            ("XCIX", 99),
            ("CDXLIV", 444),
            ("MCMXCIV", 1994),
            ("MMMCMXCIX", 3999),
        ],
    )
    def test_known_values(self, text: str, expected: int) -> None:
        """Canonical numerals decode to their value"""
        assert from_roman(text) == expected

    def test_lowercase_accepted(self) -> None:
        """Input is case-insensitive"""
        assert from_roman("mcmxciv") == 1994
        assert from_roman("xIv") == 14

    def test_mmmm_decodes_in_compatible_range(self) -> None:
        """MMMM is the canonical form of 4000"""
        assert from_roman("MMMM", max_value=4000) == 4000

    def test_mmmm_decodes_by_default(self) -> None:
        """Without a max_value argument, MMMM decodes to 4000"""
        assert from_roman("MMMM") == 4000

    @pytest.mark.parametrize("text", ["\u0131", "\u0131v", "x\u0131"])
    def test_dotless_i_rejected(self, text: str) -> None:
        """Characters that only uppercase to a Roman glyph are illegal"""
        with pytest.raises(InvalidNumeralError):
            from_roman(text)

    def test_empty_input(self) -> None:
        """Empty string raises EmptyInputError"""
        with pytest.raises(EmptyInputError):
            from_roman("")

    @pytest.mark.parametrize("text", ["abc", "XYZ", "X I", "12", "IV!", "ⅩⅣ"])
    def test_illegal_characters(self, text: str) -> None:
        """Characters outside IVXLCDM raise InvalidNumeralError"""
        with pytest.raises(InvalidNumeralError):
            from_roman(text)

    @pytest.mark.parametrize(
        "text",
        ["IIII", "VX", "IC", "XM", "VV", "IIV", "LL", "DD", "XXXX", "CCCC", "IXI", "IXIV", "MCMC"],
    )
    def test_non_canonical_rejected(self, text: str) -> None:
        """Non-canonical numerals raise InvalidNumeralError"""
        with pytest.raises(InvalidNumeralError):
            from_roman(text)

    def test_above_range_rejected(self) -> None:
        """A sum above the maximum is reported as an invalid numeral"""
        with pytest.raises(InvalidNumeralError):
            from_roman("MMMMM")

    def test_error_carries_input(self) -> None:
        """The error keeps the original input"""
        with pytest.raises(RomanNumeralError) as exc_info:
            from_roman("iiii")
        assert exc_info.value.value == "iiii"
        assert "IIII" in str(exc_info.value)


# =============================================================================
# ROUND TRIPS
# =============================================================================


class TestRoundTrip:
    """Round trips over the whole range"""

    def test_arabic_round_trip(self) -> None:
        """from_roman(to_roman(n)) == n for 1..3999"""
        for n in range(1, 4000):
            assert from_roman(to_roman(n)) == n

    def test_roman_round_trip(self) -> None:
        """to_roman(from_roman(s)) == s for every canonical numeral"""
        for n in range(1, 4000):
            numeral = to_roman(n)
            assert to_roman(from_roman(numeral)) == numeral


# =============================================================================
# CLASSIFIERS
# =============================================================================


class TestClassifiers:
    """Tests for is_valid_roman and is_valid_arabic_digits"""

    def test_roman_valid(self) -> None:
        assert is_valid_roman("MCMXCIV")
        assert is_valid_roman("mcmxciv")

    def test_roman_checks_characters_only(self) -> None:
        """Non-canonical strings of Roman letters still classify as Roman"""
        assert is_valid_roman("IIII")

    def test_roman_invalid(self) -> None:
        assert not is_valid_roman("XYZ")
        assert not is_valid_roman("X1")
        assert not is_valid_roman(" IV")
        assert not is_valid_roman("\u0131")
        assert not is_valid_roman("\u0131\u0131\u0131")

    def test_digits_valid(self) -> None:
        assert is_valid_arabic_digits("1994")
        assert is_valid_arabic_digits("0042")

    def test_digits_invalid(self) -> None:
        assert not is_valid_arabic_digits("12a")
        assert not is_valid_arabic_digits("-5")
        assert not is_valid_arabic_digits("1.5")

    def test_non_ascii_digits_rejected(self) -> None:
        """Unicode digits other than 0-9 are not accepted"""
        assert not is_valid_arabic_digits("٣")
        assert not is_valid_arabic_digits("²")

    def test_empty_string(self) -> None:
        """Empty string is vacuously valid for both classifiers"""
        assert is_valid_roman("")
        assert is_valid_arabic_digits("")
