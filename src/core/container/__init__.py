"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_create_account_handler

The container is organized into modules by concern:
- infrastructure: Core services (database, logging, validation)
- repositories: Repository factories
- account_handlers: Account and phone number handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_phone_number_validator,
)

# Repositories
from src.core.container.repositories import (
    get_account_repository,
    get_phone_number_repository,
)

# Handlers
from src.core.container.account_handlers import (
    get_create_account_handler,
    get_create_phone_number_handler,
    get_get_account_with_phone_numbers_handler,
    get_get_phone_number_handler,
    get_update_account_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_phone_number_validator",
    # Repositories
    "get_account_repository",
    "get_phone_number_repository",
    # Handlers
    "get_create_account_handler",
    "get_create_phone_number_handler",
    "get_get_account_with_phone_numbers_handler",
    "get_get_phone_number_handler",
    "get_update_account_handler",
]
