"""Validation adapters."""

from src.infrastructure.validation.phone_number_validator import (
    RegexPhoneNumberValidator,
)

__all__ = ["RegexPhoneNumberValidator"]
