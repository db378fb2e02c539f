"""Validators package exports."""

from src.domain.validators.functions import (
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    is_valid_description,
)

__all__ = [
    "DESCRIPTION_MAX_LENGTH",
    "DESCRIPTION_MIN_LENGTH",
    "is_valid_description",
]
