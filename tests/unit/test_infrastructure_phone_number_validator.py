"""Unit tests for RegexPhoneNumberValidator."""

import pytest

from src.infrastructure.validation.phone_number_validator import (
    RegexPhoneNumberValidator,
)


@pytest.mark.unit
class TestRegexPhoneNumberValidator:
    @pytest.mark.parametrize("number", ["1234567890", "0987654321", "12345678901"])
    def test_accepts_ten_or_eleven_digits(self, number):
        assert RegexPhoneNumberValidator().is_valid(number)

    @pytest.mark.parametrize(
        "number",
        [
            "",
            "123456789",  # too short
            "123456789012",  # too long
            "123-456-7890",
            "+11234567890",
            " 1234567890",
            "1234567890\n",
            "١٢٣٤٥٦٧٨٩٠",  # non-ASCII digits
        ],
    )
    def test_rejects_malformed_numbers(self, number):
        assert not RegexPhoneNumberValidator().is_valid(number)

    def test_custom_pattern(self):
        validator = RegexPhoneNumberValidator(pattern=r"\+\d{11}")

        assert validator.is_valid("+11234567890")
        assert not validator.is_valid("1234567890")
