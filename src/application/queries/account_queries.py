"""Read-side account queries."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetAccountWithPhoneNumbers:
    """Account plus the numbers it currently owns, oldest first."""

    account_id: UUID
