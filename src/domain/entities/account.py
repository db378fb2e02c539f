"""Account domain entity.

Represents a telephony account that owns zero or more phone numbers.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Description is immutable after creation
    - Status changes only through the update operation

Usage:
    from uuid_extensions import uuid7
    from src.domain.entities import Account
    from src.domain.enums import AccountStatus

    account = Account(
        id=uuid7(),
        description="John Doe",
        status=AccountStatus.ACTIVE,
    )
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.domain.entities.phone_number import PhoneNumber
from src.domain.enums.account_status import AccountStatus


@dataclass
class Account:
    """Telephony account.

    Ownership of phone numbers is exclusive: a phone number belongs to at
    most one account. A suspended account owns no phone numbers.

    Attributes:
        id: Unique account identifier.
        description: Free text, 1-1023 characters.
        status: Current lifecycle status.
        phone_numbers: Owned phone numbers in creation order. Only populated
            when loaded together with the account.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    description: str
    status: AccountStatus
    phone_numbers: list[PhoneNumber] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_suspended(self) -> bool:
        """Check if account is suspended."""
        return self.status == AccountStatus.SUSPENDED

    def can_own_phone_numbers(self) -> bool:
        """Check if phone numbers may be attached to this account.

        Returns:
            True if the account is active.
        """
        return not self.is_suspended()
