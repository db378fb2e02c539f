"""Accounts resource handlers.

Handler functions for account endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    create_account                 - Create an account
    get_account_phone_numbers      - Get account with its phone numbers
    update_account                 - Change account status
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.commands.account_commands import CreateAccount, UpdateAccount
from src.application.commands.handlers.create_account_handler import (
    CreateAccountHandler,
)
from src.application.commands.handlers.update_account_handler import (
    UpdateAccountHandler,
)
from src.application.queries.account_queries import GetAccountWithPhoneNumbers
from src.application.queries.handlers.get_account_with_phone_numbers_handler import (
    GetAccountWithPhoneNumbersHandler,
)
from src.core.container import (
    get_create_account_handler,
    get_get_account_with_phone_numbers_handler,
    get_update_account_handler,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.account_schemas import (
    AccountCreateRequest,
    AccountPhoneNumbersResponse,
    AccountResponse,
    AccountUpdateRequest,
)


async def create_account(
    request: Request,
    data: AccountCreateRequest,
    handler: CreateAccountHandler = Depends(get_create_account_handler),
) -> AccountResponse | JSONResponse:
    """Create a new account.

    POST /api/v1/accounts → 201 Created

    Args:
        request: FastAPI request object.
        data: Account description and initial status.
        handler: Create account handler (injected).

    Returns:
        AccountResponse with the created account.
        JSONResponse with RFC 7807 error on failure.
    """
    result = await handler.handle(
        CreateAccount(description=data.description, status=data.status)
    )

    return ErrorResponseBuilder.error_or_ok(
        result, request, get_trace_id(), AccountResponse.from_dto
    )


async def get_account_phone_numbers(
    request: Request,
    account_id: Annotated[UUID, Path(description="Account UUID")],
    handler: GetAccountWithPhoneNumbersHandler = Depends(
        get_get_account_with_phone_numbers_handler
    ),
) -> AccountPhoneNumbersResponse | JSONResponse:
    """Get an account together with the phone numbers it owns.

    GET /api/v1/accounts/{account_id}/phonenumbers → 200 OK

    Returns:
        AccountPhoneNumbersResponse (phone numbers oldest first).
        JSONResponse with RFC 7807 error on failure.
    """
    result = await handler.handle(GetAccountWithPhoneNumbers(account_id=account_id))

    return ErrorResponseBuilder.error_or_ok(
        result, request, get_trace_id(), AccountPhoneNumbersResponse.from_dto
    )


async def update_account(
    request: Request,
    account_id: Annotated[UUID, Path(description="Account UUID")],
    data: AccountUpdateRequest,
    handler: UpdateAccountHandler = Depends(get_update_account_handler),
) -> AccountResponse | JSONResponse:
    """Change an account's status.

    PATCH /api/v1/accounts/{account_id} → 200 OK

    Suspending detaches every phone number the account owns in the same
    transaction. Reactivating does not reattach them.

    Args:
        request: FastAPI request object.
        account_id: Account UUID.
        data: Requested status (omit for no change).
        handler: Update account handler (injected).

    Returns:
        AccountResponse with the updated account.
        JSONResponse with RFC 7807 error on failure.
    """
    result = await handler.handle(
        UpdateAccount(account_id=account_id, status=data.status)
    )

    return ErrorResponseBuilder.error_or_ok(
        result, request, get_trace_id(), AccountResponse.from_dto
    )
