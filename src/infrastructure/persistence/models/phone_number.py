"""PhoneNumber database model.

Architecture:
    - number is globally unique (uq_phone_numbers_number)
    - account_id is nullable; NULL means the number is unattached
    - Deleting an account detaches its numbers (ON DELETE SET NULL)
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import TimestampedModel


class PhoneNumber(TimestampedModel):
    """PhoneNumber model.

    Fields:
        id: UUID primary key (from TimestampedModel)
        created_at: Timestamp when created (from TimestampedModel)
        updated_at: Timestamp when last updated (from TimestampedModel)
        number: Digits only, up to 11 characters, unique
        account_id: FK to accounts table (nullable)

    Indexes:
        - uq_phone_numbers_number: Unique phone number
        - ix_phone_numbers_account_created: Owned numbers in creation order
    """

    __tablename__ = "phone_numbers"
    __table_args__ = (
        Index("uq_phone_numbers_number", "number", unique=True),
        Index("ix_phone_numbers_account_created", "account_id", "created_at"),
    )

    number: Mapped[str] = mapped_column(
        String(11),
        nullable=False,
        comment="Phone number (digits only)",
    )

    account_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("accounts.id", ondelete="SET NULL"),
        nullable=True,
        comment="FK to accounts table (NULL when unattached)",
    )
