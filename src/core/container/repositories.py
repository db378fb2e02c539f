"""Repository factories.

Both repositories of a request share the session from ``get_db_session``,
so a handler that uses them together works inside one transaction.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session
from src.infrastructure.persistence.repositories import (
    AccountRepository,
    PhoneNumberRepository,
)


async def get_account_repository(
    session: AsyncSession = Depends(get_db_session),
) -> AccountRepository:
    return AccountRepository(session=session)


async def get_phone_number_repository(
    session: AsyncSession = Depends(get_db_session),
) -> PhoneNumberRepository:
    return PhoneNumberRepository(session=session)
