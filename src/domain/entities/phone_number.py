"""PhoneNumber domain entity.

A uniquely-numbered resource optionally owned by one Account.
Phone numbers are never deleted as a side effect of account suspension,
only detached (account_id set to None).
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class PhoneNumber:
    """Phone number resource.

    Attributes:
        id: Unique phone number identifier.
        number: Digits only, unique system-wide.
        account_id: Owning account, or None when unattached.
        created_at: Record creation timestamp (defines list order).
        updated_at: Last modification timestamp.
    """

    id: UUID
    number: str
    account_id: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
