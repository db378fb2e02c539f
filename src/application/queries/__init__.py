"""Application queries (CQRS read side)."""

from src.application.queries.account_queries import GetAccountWithPhoneNumbers
from src.application.queries.phone_number_queries import GetPhoneNumber

__all__ = [
    "GetAccountWithPhoneNumbers",
    "GetPhoneNumber",
]
