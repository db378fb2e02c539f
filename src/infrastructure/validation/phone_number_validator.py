"""Regex-based phone number validator.

Default implementation of PhoneNumberValidatorProtocol: digits only,
10 or 11 characters (the phone_numbers.number column is varchar(11)).
"""

import re


class RegexPhoneNumberValidator:
    """Validate phone numbers against a full-match regular expression.

    Args:
        pattern: Regular expression the whole number must match.

    Example:
        >>> RegexPhoneNumberValidator().is_valid("1234567890")
        True
        >>> RegexPhoneNumberValidator().is_valid("123-456-7890")
        False
    """

    DEFAULT_PATTERN = r"\d{10,11}"

    def __init__(self, pattern: str = DEFAULT_PATTERN) -> None:
        self._pattern = re.compile(pattern, re.ASCII)

    def is_valid(self, number: str) -> bool:
        return self._pattern.fullmatch(number) is not None
