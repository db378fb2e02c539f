"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import AccountCreateRequest, AccountResponse
"""

from src.schemas.account_schemas import (
    AccountCreateRequest,
    AccountPhoneNumbersResponse,
    AccountResponse,
    AccountUpdateRequest,
)
from src.schemas.phone_number_schemas import (
    PhoneNumberCreateRequest,
    PhoneNumberResponse,
)

__all__ = [
    "AccountCreateRequest",
    "AccountPhoneNumbersResponse",
    "AccountResponse",
    "AccountUpdateRequest",
    "PhoneNumberCreateRequest",
    "PhoneNumberResponse",
]
