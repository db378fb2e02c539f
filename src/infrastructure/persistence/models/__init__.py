"""Database models for persistence layer.

SQLAlchemy database models that map to database tables. These are
infrastructure concerns and should not be imported by the domain layer.

Models Organization:
    - account.py: Account model
    - phone_number.py: PhoneNumber model

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here and are mapped via the repository layer.
"""

from src.infrastructure.persistence.models.account import Account
from src.infrastructure.persistence.models.phone_number import PhoneNumber

__all__ = [
    "Account",
    "PhoneNumber",
]
