"""Application DTOs returned by command and query handlers."""

from src.application.dtos.account_dtos import (
    AccountResult,
    AccountWithPhoneNumbersResult,
    PhoneNumberResult,
)

__all__ = [
    "AccountResult",
    "AccountWithPhoneNumbersResult",
    "PhoneNumberResult",
]
