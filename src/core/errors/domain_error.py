"""Base domain error class for Railway-Oriented Programming.

DomainError is the error payload carried by every Failure in the system.
It represents expected failures (validation, not found, conflict) and flows
through the layers as data (Result types), not exceptions.

Architecture:
- Does NOT inherit from Exception (not raised, returned in Result)
- Message always comes from the error catalog (never ad hoc)
- Forwarded unchanged from repository to handler to presentation

Usage:
    from src.core.enums import ErrorCode
    from src.core.errors import DomainError
    from src.core.result import Failure

    return Failure(error=DomainError.of(ErrorCode.RESOURCE_NOT_FOUND))
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors.error_catalog import get_error_definition


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging (never shown as the message).
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    @classmethod
    def of(
        cls, code: ErrorCode, details: dict[str, str] | None = None
    ) -> "DomainError":
        """Build an error whose message is taken from the catalog.

        Args:
            code: Error code.
            details: Optional debugging context.

        Returns:
            DomainError with the catalog message for ``code``.
        """
        return cls(
            code=code,
            message=get_error_definition(code).message,
            details=details,
        )

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
