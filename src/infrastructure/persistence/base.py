"""Declarative base for VoiceFlex tables.

Both tables share the same identity and audit columns, provided by
TimestampedModel:

    BaseModel (DeclarativeBase, holds the metadata)
        └── TimestampedModel (id, created_at, updated_at)
            ├── Account
            └── PhoneNumber

Repositories set created_at/updated_at from Python so the values are known
without a refresh after commit. The server defaults cover rows written
outside the ORM (migrations, manual SQL).

The generic Uuid type stores native UUIDs on PostgreSQL and CHAR(32) on SQLite.
"""

from datetime import datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    """Registry and metadata shared by all models (used by Alembic)."""

    __abstract__ = True


class TimestampedModel(BaseModel):
    """Abstract model with a uuid7 primary key and UTC timestamps."""

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id})>"
