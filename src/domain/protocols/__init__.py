"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import AccountRepository, LoggerProtocol
"""

# Service protocols
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.phone_number_validator_protocol import (
    PhoneNumberValidatorProtocol,
)

# Repository protocols
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.phone_number_repository import PhoneNumberRepository

__all__ = [
    # Service protocols
    "LoggerProtocol",
    "PhoneNumberValidatorProtocol",
    # Repository protocols
    "AccountRepository",
    "PhoneNumberRepository",
]
