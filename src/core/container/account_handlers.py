"""Account and phone number handler dependency factories.

Request-scoped handler instances. FastAPI caches get_db_session per
request, so every repository injected into one handler shares the same
session and a row lock taken through one repository is held while the
other writes.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.infrastructure import get_logger, get_phone_number_validator
from src.core.container.repositories import (
    get_account_repository,
    get_phone_number_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.create_account_handler import (
        CreateAccountHandler,
    )
    from src.application.commands.handlers.create_phone_number_handler import (
        CreatePhoneNumberHandler,
    )
    from src.application.commands.handlers.update_account_handler import (
        UpdateAccountHandler,
    )
    from src.application.queries.handlers.get_account_with_phone_numbers_handler import (
        GetAccountWithPhoneNumbersHandler,
    )
    from src.application.queries.handlers.get_phone_number_handler import (
        GetPhoneNumberHandler,
    )
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        PhoneNumberRepository,
    )


# ============================================================================
# Account Handler Factories (Request-Scoped)
# ============================================================================


async def get_create_account_handler(
    account_repo: "AccountRepository" = Depends(get_account_repository),
) -> "CreateAccountHandler":
    """Get CreateAccount command handler (request-scoped).

    Returns:
        CreateAccountHandler instance.
    """
    from src.application.commands.handlers.create_account_handler import (
        CreateAccountHandler,
    )

    return CreateAccountHandler(account_repo=account_repo, logger=get_logger())


async def get_update_account_handler(
    account_repo: "AccountRepository" = Depends(get_account_repository),
) -> "UpdateAccountHandler":
    """Get UpdateAccount command handler (request-scoped).

    Returns:
        UpdateAccountHandler instance.
    """
    from src.application.commands.handlers.update_account_handler import (
        UpdateAccountHandler,
    )

    return UpdateAccountHandler(account_repo=account_repo, logger=get_logger())


async def get_get_account_with_phone_numbers_handler(
    account_repo: "AccountRepository" = Depends(get_account_repository),
) -> "GetAccountWithPhoneNumbersHandler":
    """Get GetAccountWithPhoneNumbers query handler (request-scoped)."""
    from src.application.queries.handlers.get_account_with_phone_numbers_handler import (
        GetAccountWithPhoneNumbersHandler,
    )

    return GetAccountWithPhoneNumbersHandler(account_repo=account_repo)


# ============================================================================
# Phone Number Handler Factories (Request-Scoped)
# ============================================================================


async def get_create_phone_number_handler(
    phone_number_repo: "PhoneNumberRepository" = Depends(get_phone_number_repository),
    account_repo: "AccountRepository" = Depends(get_account_repository),
) -> "CreatePhoneNumberHandler":
    """Get CreatePhoneNumber command handler (request-scoped).

    Creates handler with:
    - PhoneNumberRepository and AccountRepository (same request session)
    - PhoneNumberValidatorProtocol (app-scoped)
    - LoggerProtocol (app-scoped)
    """
    from src.application.commands.handlers.create_phone_number_handler import (
        CreatePhoneNumberHandler,
    )

    return CreatePhoneNumberHandler(
        phone_number_repo=phone_number_repo,
        account_repo=account_repo,
        validator=get_phone_number_validator(),
        logger=get_logger(),
    )


async def get_get_phone_number_handler(
    phone_number_repo: "PhoneNumberRepository" = Depends(get_phone_number_repository),
) -> "GetPhoneNumberHandler":
    from src.application.queries.handlers.get_phone_number_handler import (
        GetPhoneNumberHandler,
    )

    return GetPhoneNumberHandler(phone_number_repo=phone_number_repo)
