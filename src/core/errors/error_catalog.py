"""Error catalog (static lookup table).

Single source of truth for the human-readable message and category of every
ErrorCode. The table is closed: a compliance test asserts that every ErrorCode
member has exactly one entry.

Usage:
    from src.core.errors.error_catalog import get_error_definition

    definition = get_error_definition(ErrorCode.RESOURCE_NOT_FOUND)
    definition.message   # "A resource with this id could not be found."
    definition.category  # ErrorCategory.NOT_FOUND
"""

from dataclasses import dataclass

from src.core.enums.error_category import ErrorCategory
from src.core.enums.error_code import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class ErrorDefinition:
    """Catalog entry for a single error code.

    Attributes:
        message: Fixed human-readable message returned to clients.
        category: Transport status classification.
    """

    message: str
    category: ErrorCategory


ERROR_CATALOG: dict[ErrorCode, ErrorDefinition] = {
    ErrorCode.RESOURCE_NOT_FOUND: ErrorDefinition(
        message="A resource with this id could not be found.",
        category=ErrorCategory.NOT_FOUND,
    ),
    ErrorCode.PHONE_NUMBER_INVALID: ErrorDefinition(
        message="The phone number must consist of 10 or 11 digits.",
        category=ErrorCategory.VALIDATION,
    ),
    ErrorCode.PHONE_NUMBER_DUPLICATE: ErrorDefinition(
        message="A phone number with this number already exists.",
        category=ErrorCategory.CONFLICT,
    ),
    ErrorCode.ACCOUNT_SUSPENDED: ErrorDefinition(
        message="Phone numbers cannot be assigned to a suspended account.",
        category=ErrorCategory.CONFLICT,
    ),
    ErrorCode.DESCRIPTION_LENGTH_INVALID: ErrorDefinition(
        message=(
            "The description must have at least 1 and not more than "
            "1023 characters."
        ),
        category=ErrorCategory.VALIDATION,
    ),
}


def get_error_definition(code: ErrorCode) -> ErrorDefinition:
    """Look up the catalog entry for an error code.

    Args:
        code: Error code to look up.

    Returns:
        ErrorDefinition for the code.

    Raises:
        KeyError: If the code has no catalog entry (programming error,
            prevented by the catalog compliance test).
    """
    return ERROR_CATALOG[code]
