"""Application commands (CQRS write side)."""

from src.application.commands.account_commands import CreateAccount, UpdateAccount
from src.application.commands.phone_number_commands import CreatePhoneNumber

__all__ = [
    "CreateAccount",
    "CreatePhoneNumber",
    "UpdateAccount",
]
