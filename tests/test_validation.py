import pytest

from idr_converter.models.conversion import Invalid, Valid, ValidationErrorKind
from idr_converter.services.validation import (
    accepts_keystroke_text,
    parse_amount,
    validate,
)


class TestValidate:
    """Tests for amount validation rules and their order."""

    @pytest.mark.parametrize("raw", ["", " ", "   ", "\t", "\n"])
    def test_blank_input(self, raw):
        """
        Test that empty or whitespace-only input asks for an amount.
        """
        outcome = validate(raw)

        assert outcome == Invalid("enter an amount", ValidationErrorKind.EMPTY_INPUT)

    def test_none_treated_as_blank(self):
        assert validate(None) == Invalid(
            "enter an amount", ValidationErrorKind.EMPTY_INPUT
        )

    @pytest.mark.parametrize(
        "raw",
        ["abc", "1.2.3", ".", "1,000", "1_000", "nan", "inf", "-inf", "Infinity", "12abc", "1e400", "--5", "0x10"],
    )
    def test_malformed_number(self, raw):
        outcome = validate(raw)

        assert isinstance(outcome, Invalid)
        assert outcome.kind is ValidationErrorKind.MALFORMED_NUMBER
        assert outcome.reason == "invalid number format"

    @pytest.mark.parametrize("raw", ["-5", "0", "0.0", "-0", "-0.01", "0e10"])
    def test_non_positive_amount(self, raw):
        outcome = validate(raw)

        assert outcome == Invalid(
            "amount must be greater than 0", ValidationErrorKind.NON_POSITIVE_AMOUNT
        )

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("100000", 100000.0),
            ("0.01", 0.01),
            (".5", 0.5),
            ("5.", 5.0),
            ("+7", 7.0),
            ("1e3", 1000.0),
            (" 250 ", 250.0),
        ],
    )
    def test_valid_amount(self, raw, expected):
        """
        Test that positive decimal input is accepted with its parsed value.
        """
        assert validate(raw) == Valid(expected)

    def test_blank_checked_before_format(self):
        assert validate("  ").kind is ValidationErrorKind.EMPTY_INPUT

    def test_no_upper_bound(self):
        assert isinstance(validate("1" + "0" * 30), Valid)


class TestParseAmount:

    def test_returns_none_for_non_decimal(self):
        assert parse_amount("abc") is None

    def test_ignores_surrounding_whitespace(self):
        assert parse_amount("  42.5\n") == 42.5

    def test_rejects_non_ascii_digits(self):
        assert parse_amount("١٢") is None


class TestKeystrokeFilter:
    """Tests for the amount field's input filter."""

    @pytest.mark.parametrize("text", ["", "1", "123", "1.", ".5", "12.50"])
    def test_accepts_digits_and_single_dot(self, text):
        assert accepts_keystroke_text(text)

    @pytest.mark.parametrize("text", ["-5", "1.2.3", "abc", "1e5", "1,000", " 1", "12\n"])
    def test_rejects_other_text(self, text):
        assert not accepts_keystroke_text(text)
