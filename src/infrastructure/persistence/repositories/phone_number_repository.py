"""PhoneNumberRepository - SQLAlchemy implementation of PhoneNumberRepository protocol.

Uniqueness of the phone number is enforced by the database unique index;
a violation is reported as a PHONE_NUMBER_DUPLICATE failure.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.phone_number import PhoneNumber
from src.infrastructure.persistence.models.phone_number import (
    PhoneNumber as PhoneNumberModel,
)


class PhoneNumberRepository:
    """SQLAlchemy implementation of PhoneNumberRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, phone_number: PhoneNumber) -> Result[PhoneNumber, DomainError]:
        """Insert a new phone number and commit.

        Args:
            phone_number: PhoneNumber entity to persist.

        Returns:
            Success(PhoneNumber): Stored phone number.
            Failure(DomainError): PHONE_NUMBER_DUPLICATE if the number exists.
        """
        model = self._to_model(phone_number)
        self.session.add(model)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return Failure(
                error=DomainError.of(
                    ErrorCode.PHONE_NUMBER_DUPLICATE,
                    details={"number": phone_number.number},
                )
            )

        return Success(value=self._to_domain(model))

    async def find_by_id(self, phone_number_id: UUID) -> PhoneNumber | None:
        """Find phone number by ID.

        Args:
            phone_number_id: Phone number's unique identifier.

        Returns:
            Domain PhoneNumber entity if found, None otherwise.
        """
        stmt = select(PhoneNumberModel).where(PhoneNumberModel.id == phone_number_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    def _to_domain(self, model: PhoneNumberModel) -> PhoneNumber:
        return PhoneNumber(
            id=model.id,
            number=model.number,
            account_id=model.account_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: PhoneNumber) -> PhoneNumberModel:
        return PhoneNumberModel(
            id=entity.id,
            number=entity.number,
            account_id=entity.account_id,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
