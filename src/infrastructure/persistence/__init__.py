"""SQLAlchemy persistence for accounts and phone numbers.

- base: declarative base and the shared id/timestamp columns
- database: async engine and session factory (PostgreSQL or SQLite)
- models: table mappings
- repositories: AccountRepository and PhoneNumberRepository adapters
"""

from src.infrastructure.persistence.base import BaseModel, TimestampedModel
from src.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "Database",
    "TimestampedModel",
]
