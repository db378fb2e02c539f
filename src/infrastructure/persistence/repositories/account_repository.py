"""AccountRepository - SQLAlchemy implementation of AccountRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Account entities and database AccountModel.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.account import Account
from src.domain.entities.phone_number import PhoneNumber
from src.domain.enums.account_status import AccountStatus
from src.infrastructure.persistence.models.account import Account as AccountModel
from src.infrastructure.persistence.models.phone_number import (
    PhoneNumber as PhoneNumberModel,
)


class AccountRepository:
    """SQLAlchemy implementation of AccountRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Database errors are not caught here; they propagate to the caller and
    the session is rolled back by the request-scoped session manager.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = AccountRepository(session)
        ...     account = await repo.find_with_phone_numbers(account_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, account: Account) -> Account:
        """Insert a new account.

        Args:
            account: Account entity to persist.

        Returns:
            Stored account entity.
        """
        model = self._to_model(account)
        self.session.add(model)
        await self.session.commit()

        return self._to_domain(model)

    async def find_by_id(
        self, account_id: UUID, *, for_update: bool = False
    ) -> Account | None:
        """Find account by ID (phone numbers not loaded).

        Args:
            account_id: Account's unique identifier.
            for_update: Take a row lock held until the next commit/rollback.

        Returns:
            Domain Account entity if found, None otherwise.
        """
        model = await self._get_model(account_id, for_update=for_update)
        if model is None:
            return None

        return self._to_domain(model)

    async def find_with_phone_numbers(self, account_id: UUID) -> Account | None:
        """Find account by ID with owned phone numbers in creation order.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Domain Account with phone_numbers populated, None if not found.
        """
        model = await self._get_model(account_id)
        if model is None:
            return None

        stmt = (
            select(PhoneNumberModel)
            .where(PhoneNumberModel.account_id == account_id)
            .order_by(PhoneNumberModel.created_at, PhoneNumberModel.id)
        )
        result = await self.session.execute(stmt)
        phone_numbers = [
            _phone_number_to_domain(row) for row in result.scalars().all()
        ]

        return self._to_domain(model, phone_numbers=phone_numbers)

    async def suspend(self, account_id: UUID) -> Account | None:
        """Detach all owned phone numbers and suspend the account atomically.

        Locks the account row, clears account_id on every owned phone number
        with one bulk UPDATE, writes the status and commits once. Any error
        before the commit leaves both tables unchanged.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Suspended account (no phone numbers), None if not found.
        """
        model = await self._get_model(account_id, for_update=True)
        if model is None:
            await self.session.rollback()
            return None

        now = datetime.now(UTC)
        await self.session.execute(
            update(PhoneNumberModel)
            .where(PhoneNumberModel.account_id == account_id)
            .values(account_id=None, updated_at=now)
        )
        model.status = AccountStatus.SUSPENDED.value
        model.updated_at = now
        await self.session.commit()

        return self._to_domain(model)

    async def activate(self, account_id: UUID) -> Account | None:
        """Set account status to active. Phone numbers are not reattached.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Activated account, None if not found.
        """
        model = await self._get_model(account_id, for_update=True)
        if model is None:
            await self.session.rollback()
            return None

        model.status = AccountStatus.ACTIVE.value
        model.updated_at = datetime.now(UTC)
        await self.session.commit()

        return self._to_domain(model)

    async def _get_model(
        self, account_id: UUID, *, for_update: bool = False
    ) -> AccountModel | None:
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(
        self,
        model: AccountModel,
        *,
        phone_numbers: list[PhoneNumber] | None = None,
    ) -> Account:
        """Convert database model to domain entity.

        Args:
            model: SQLAlchemy AccountModel instance.
            phone_numbers: Owned phone numbers, when loaded.

        Returns:
            Domain Account entity.
        """
        return Account(
            id=model.id,
            description=model.description,
            status=AccountStatus(model.status),
            phone_numbers=phone_numbers or [],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Account) -> AccountModel:
        return AccountModel(
            id=entity.id,
            description=entity.description,
            status=entity.status.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


def _phone_number_to_domain(model: PhoneNumberModel) -> PhoneNumber:
    return PhoneNumber(
        id=model.id,
        number=model.number,
        account_id=model.account_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
