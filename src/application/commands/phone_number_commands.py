"""Phone number commands (CQRS write operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreatePhoneNumber:
    """Create a phone number, optionally attached to an account.

    Attributes:
        number: Phone number as supplied by the client.
        account_id: Owning account (must exist and be active), or None.

    Example:
        >>> command = CreatePhoneNumber(number="1234567890", account_id=account_id)
        >>> result = await handler.handle(command)
    """

    number: str
    account_id: UUID | None = None
