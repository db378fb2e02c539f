"""Account commands (CQRS write operations).

Commands represent user intent to change account state. They are
immutable dataclasses with imperative names.

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result values
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums.account_status import AccountStatus


@dataclass(frozen=True, kw_only=True)
class CreateAccount:
    """Create a new account.

    Attributes:
        description: Free text, must be 1-1023 characters.
        status: Initial status (active or suspended).

    Example:
        >>> command = CreateAccount(
        ...     description="John Doe",
        ...     status=AccountStatus.ACTIVE,
        ... )
        >>> result = await handler.handle(command)
    """

    description: str
    status: AccountStatus = AccountStatus.ACTIVE


@dataclass(frozen=True, kw_only=True)
class UpdateAccount:
    """Change an account's status.

    Suspending detaches every phone number the account owns. Activating
    does not reattach them. ``status=None`` leaves the account unchanged.

    Attributes:
        account_id: Account to update.
        status: Requested status, or None for no change.
    """

    account_id: UUID
    status: AccountStatus | None = None
