"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. Every handler and repository returns a Result for
expected failures (validation, not found, conflict); infrastructure faults are
still raised as exceptions.

Usage:
    def find_account(account_id: UUID) -> Result[Account, DomainError]:
        if account is None:
            return Failure(error=DomainError.of(ErrorCode.RESOURCE_NOT_FOUND))
        return Success(value=account)

    match find_account(account_id):
        case Success(value=account):
            print(account.description)
        case Failure(error=error):
            print(error.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T

    @property
    def is_success(self) -> bool:
        """Always True for Success."""
        return True

    @property
    def is_failure(self) -> bool:
        """Always False for Success."""
        return False


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E

    @property
    def is_success(self) -> bool:
        """Always False for Failure."""
        return False

    @property
    def is_failure(self) -> bool:
        """Always True for Failure."""
        return True


# Type alias for Result union
Result = Union[Success[T], Failure[E]]
