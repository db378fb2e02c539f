"""Account and PhoneNumber entities (plain dataclasses, no ORM)."""

from src.domain.entities.account import Account
from src.domain.entities.phone_number import PhoneNumber

__all__ = [
    "Account",
    "PhoneNumber",
]
