"""Centralized validation functions.

Validators are pure predicates; callers turn a False result into a
Failure carrying the matching catalog error code.
"""

DESCRIPTION_MIN_LENGTH = 1
DESCRIPTION_MAX_LENGTH = 1023


def is_valid_description(description: str) -> bool:
    """Check account description length.

    Args:
        description: Account description as supplied by the client.

    Returns:
        True if 1 <= len(description) <= 1023.

    Example:
        >>> is_valid_description("John Doe")
        True
        >>> is_valid_description("")
        False
    """
    return DESCRIPTION_MIN_LENGTH <= len(description) <= DESCRIPTION_MAX_LENGTH
