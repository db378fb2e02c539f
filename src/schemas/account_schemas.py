"""HTTP bodies for the /accounts endpoints.

``description`` has no length constraint at this layer. CreateAccountHandler
checks it so the client gets DESCRIPTION_LENGTH_INVALID (400) from the
catalog rather than a generic 422.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos.account_dtos import (
    AccountResult,
    AccountWithPhoneNumbersResult,
)
from src.domain.enums.account_status import AccountStatus
from src.schemas.phone_number_schemas import PhoneNumberResponse


class AccountCreateRequest(BaseModel):
    description: str = Field(
        ...,
        description="Free text, 1 to 1023 characters",
        examples=["John Doe"],
    )
    status: AccountStatus = Field(
        default=AccountStatus.ACTIVE,
        description="Initial status",
        examples=["active"],
    )


class AccountUpdateRequest(BaseModel):
    """PATCH body. A missing or null ``status`` changes nothing."""

    status: AccountStatus | None = Field(
        default=None,
        description="Target status; 'suspended' detaches every owned phone number",
        examples=["suspended"],
    )


class AccountResponse(BaseModel):
    id: UUID = Field(..., description="Account id (UUIDv7)")
    description: str
    status: str = Field(..., examples=["active", "suspended"])
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: AccountResult) -> "AccountResponse":
        return cls(
            id=dto.id,
            description=dto.description,
            status=dto.status,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class AccountPhoneNumbersResponse(AccountResponse):
    """``AccountResponse`` with the owned numbers in creation order."""

    phone_numbers: list[PhoneNumberResponse] = Field(
        ..., description="Owned phone numbers, oldest first"
    )

    @classmethod
    def from_dto(  # type: ignore[override]
        cls, dto: AccountWithPhoneNumbersResult
    ) -> "AccountPhoneNumbersResponse":
        base = AccountResponse.from_dto(dto).model_dump()
        return cls(
            **base,
            phone_numbers=[PhoneNumberResponse.from_dto(n) for n in dto.phone_numbers],
        )
