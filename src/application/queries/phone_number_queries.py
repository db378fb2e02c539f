"""Phone number queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetPhoneNumber:
    """Get a single phone number by ID.

    Attributes:
        phone_number_id: Phone number to retrieve.
    """

    phone_number_id: UUID
