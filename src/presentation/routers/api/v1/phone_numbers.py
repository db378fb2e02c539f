"""Phone numbers resource handlers.

Handlers:
    create_phone_number  - Create a phone number (optionally attached)
    get_phone_number     - Get a phone number
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.create_phone_number_handler import (
    CreatePhoneNumberHandler,
)
from src.application.commands.phone_number_commands import CreatePhoneNumber
from src.application.queries.handlers.get_phone_number_handler import (
    GetPhoneNumberHandler,
)
from src.application.queries.phone_number_queries import GetPhoneNumber
from src.core.container import (
    get_create_phone_number_handler,
    get_get_phone_number_handler,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.phone_number_schemas import (
    PhoneNumberCreateRequest,
    PhoneNumberResponse,
)


async def create_phone_number(
    request: Request,
    data: PhoneNumberCreateRequest,
    handler: CreatePhoneNumberHandler = Depends(get_create_phone_number_handler),
) -> PhoneNumberResponse | JSONResponse:
    """Create a phone number.

    POST /api/v1/phonenumbers → 201 Created

    Returns:
        PhoneNumberResponse with the created phone number.
        JSONResponse with RFC 7807 error on failure (400 invalid number,
        404 unknown account, 409 duplicate number or suspended account).
    """
    result = await handler.handle(
        CreatePhoneNumber(number=data.number, account_id=data.account_id)
    )

    return ErrorResponseBuilder.error_or_ok(
        result, request, get_trace_id(), PhoneNumberResponse.from_dto
    )


async def get_phone_number(
    request: Request,
    phone_number_id: Annotated[UUID, Path(description="Phone number UUID")],
    handler: GetPhoneNumberHandler = Depends(get_get_phone_number_handler),
) -> PhoneNumberResponse | JSONResponse:
    """Get a phone number.

    GET /api/v1/phonenumbers/{phone_number_id} → 200 OK
    """
    result = await handler.handle(GetPhoneNumber(phone_number_id=phone_number_id))

    return ErrorResponseBuilder.error_or_ok(
        result, request, get_trace_id(), PhoneNumberResponse.from_dto
    )
