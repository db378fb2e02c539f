"""Repository adapters implementing the domain repository protocols."""

from src.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from src.infrastructure.persistence.repositories.phone_number_repository import (
    PhoneNumberRepository,
)

__all__ = [
    "AccountRepository",
    "PhoneNumberRepository",
]
