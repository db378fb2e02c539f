"""PhoneNumberValidatorProtocol - pluggable phone number format check.

The application layer calls this capability before persisting a phone
number; it never implements the format rules itself.
"""

from typing import Protocol


class PhoneNumberValidatorProtocol(Protocol):
    """Protocol for phone number format validators."""

    def is_valid(self, number: str) -> bool:
        """Check whether ``number`` is an acceptable phone number.

        Args:
            number: Candidate phone number as supplied by the client.

        Returns:
            True if the number may be stored.
        """
        ...
