"""create_accounts_and_phone_numbers

Revision ID: 3f1c2a9b7d41
Revises:
Create Date: 2026-10-18 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9b7d41"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create accounts and phone_numbers tables."""
    op.create_table(
        "accounts",
        # id, created_at, updated_at from TimestampedModel
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "description",
            sa.String(length=1023),
            nullable=False,
            comment="Account description (1-1023 characters)",
        ),
        sa.Column(
            "status",
            sa.String(length=20),
            nullable=False,
            comment="Account status (active, suspended)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_accounts_status", "accounts", ["status"])

    op.create_table(
        "phone_numbers",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "number",
            sa.String(length=11),
            nullable=False,
            comment="Phone number (digits only)",
        ),
        sa.Column(
            "account_id",
            sa.Uuid(),
            nullable=True,
            comment="FK to accounts table (NULL when unattached)",
        ),
        sa.ForeignKeyConstraint(
            ["account_id"],
            ["accounts.id"],
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "uq_phone_numbers_number", "phone_numbers", ["number"], unique=True
    )
    op.create_index(
        "ix_phone_numbers_account_created",
        "phone_numbers",
        ["account_id", "created_at"],
    )


def downgrade() -> None:
    """Drop phone_numbers and accounts tables."""
    op.drop_index("ix_phone_numbers_account_created", table_name="phone_numbers")
    op.drop_index("uq_phone_numbers_number", table_name="phone_numbers")
    op.drop_table("phone_numbers")
    op.drop_index("ix_accounts_status", table_name="accounts")
    op.drop_table("accounts")
