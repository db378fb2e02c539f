"""Account and phone number result DTOs.

Handlers return these DTOs (not domain entities) so the presentation
layer never depends on domain types.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities.account import Account
from src.domain.entities.phone_number import PhoneNumber


@dataclass
class PhoneNumberResult:
    """Phone number result DTO.

    Attributes:
        id: Phone number identifier.
        number: Digits-only number.
        account_id: Owning account, None when unattached.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    number: str
    account_id: UUID | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, phone_number: PhoneNumber) -> "PhoneNumberResult":
        return cls(
            id=phone_number.id,
            number=phone_number.number,
            account_id=phone_number.account_id,
            created_at=phone_number.created_at,
            updated_at=phone_number.updated_at,
        )


@dataclass
class AccountResult:
    """Account result DTO (without phone numbers).

    Attributes:
        id: Account identifier.
        description: Account description.
        status: Status value ("active" or "suspended").
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    description: str
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, account: Account) -> "AccountResult":
        return cls(
            id=account.id,
            description=account.description,
            status=account.status.value,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


@dataclass
class AccountWithPhoneNumbersResult:
    """Account result DTO including owned phone numbers in creation order."""

    id: UUID
    description: str
    status: str
    phone_numbers: list[PhoneNumberResult]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, account: Account) -> "AccountWithPhoneNumbersResult":
        return cls(
            id=account.id,
            description=account.description,
            status=account.status.value,
            phone_numbers=[
                PhoneNumberResult.from_entity(phone_number)
                for phone_number in account.phone_numbers
            ],
            created_at=account.created_at,
            updated_at=account.updated_at,
        )
