"""Process-wide services and the per-request database session.

The ``lru_cache`` factories build each service once per process. API
tests replace them through ``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.phone_number_validator_protocol import (
        PhoneNumberValidatorProtocol,
    )


@lru_cache()
def get_database() -> Database:
    return Database(database_url=settings.database_url, echo=settings.db_echo)


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """structlog console logger; JSON lines everywhere except development."""
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.environment.uses_json_logs,
        level=settings.log_level,
    )


@lru_cache()
def get_phone_number_validator() -> "PhoneNumberValidatorProtocol":
    from src.infrastructure.validation.phone_number_validator import (
        RegexPhoneNumberValidator,
    )

    return RegexPhoneNumberValidator()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request, committed or rolled back when it ends."""
    async with get_database().get_session() as session:
        yield session
