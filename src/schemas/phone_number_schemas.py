"""Phone number request and response schemas.

The number format is not constrained here: the handler validates it through
the phone number validator and reports PHONE_NUMBER_INVALID.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos.account_dtos import PhoneNumberResult


class PhoneNumberCreateRequest(BaseModel):
    """Request body for creating a phone number.

    Attributes:
        number: Digits only, 10 or 11 characters.
        account_id: Optional owning account.
    """

    number: str = Field(
        ...,
        description="Phone number (10 or 11 digits)",
        examples=["1234567890"],
    )
    account_id: UUID | None = Field(
        default=None,
        description="Owning account; must exist and be active",
    )


class PhoneNumberResponse(BaseModel):
    """Single phone number response."""

    id: UUID = Field(..., description="Phone number unique identifier")
    number: str = Field(..., description="Phone number", examples=["1234567890"])
    account_id: UUID | None = Field(
        None, description="Owning account (null when unattached)"
    )
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_dto(cls, dto: PhoneNumberResult) -> "PhoneNumberResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            number=dto.number,
            account_id=dto.account_id,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )
