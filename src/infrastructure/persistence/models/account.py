"""Account database model.

This module defines the Account model for storing telephony accounts.

Architecture:
    - Status stored as lowercase string, mapped to AccountStatus enum
    - Phone numbers reference accounts via phone_numbers.account_id
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import TimestampedModel


class Account(TimestampedModel):
    """Account model for telephony account storage.

    Fields:
        id: UUID primary key (from TimestampedModel)
        created_at: Timestamp when created (from TimestampedModel)
        updated_at: Timestamp when last updated (from TimestampedModel)
        description: Free text, 1-1023 characters (validated before insert)
        status: Account status (active, suspended)

    Example:
        account = Account(description="John Doe", status="active")
        session.add(account)
        await session.commit()
    """

    __tablename__ = "accounts"

    description: Mapped[str] = mapped_column(
        String(1023),
        nullable=False,
        comment="Account description (1-1023 characters)",
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        index=True,
        comment="Account status (active, suspended)",
    )
