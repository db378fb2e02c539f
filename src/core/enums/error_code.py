"""Domain-level error codes (machine-readable).

The enum value is the stable identifier exposed to API clients. Codes are
never reused for a different meaning; new failures get new codes.

Categories:
- Resource errors (RESOURCE_NOT_FOUND)
- Validation errors (*_INVALID)
- Conflict errors (*_DUPLICATE, ACCOUNT_SUSPENDED)

Reference:
    - src/core/errors/error_catalog.py (message and category per code)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    VOICEFLEX_0004 is reserved and must not be assigned.
    """

    # Resource errors
    RESOURCE_NOT_FOUND = "VOICEFLEX_0000"

    # Validation errors
    PHONE_NUMBER_INVALID = "VOICEFLEX_0001"
    DESCRIPTION_LENGTH_INVALID = "VOICEFLEX_0005"

    # Conflict errors
    PHONE_NUMBER_DUPLICATE = "VOICEFLEX_0002"
    ACCOUNT_SUSPENDED = "VOICEFLEX_0003"
