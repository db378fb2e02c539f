"""ROUTE_REGISTRY: every v1 endpoint, in one place.

Adding an endpoint means adding an entry here; ``v1_router`` is built from
this list and the compliance tests compare the two.
"""

from src.core.enums import ErrorCode
from src.presentation.routers.api.v1.accounts import (
    create_account,
    get_account_phone_numbers,
    update_account,
)
from src.presentation.routers.api.v1.phone_numbers import (
    create_phone_number,
    get_phone_number,
)
from src.presentation.routers.api.v1.routes.metadata import HTTPMethod, RouteMetadata
from src.schemas.account_schemas import AccountPhoneNumbersResponse, AccountResponse
from src.schemas.phone_number_schemas import PhoneNumberResponse

_ACCOUNTS = ["Accounts"]
_PHONE_NUMBERS = ["Phone Numbers"]

ROUTE_REGISTRY: list[RouteMetadata] = [
    # accounts
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/accounts",
        handler=create_account,
        tags=_ACCOUNTS,
        summary="Create account",
        description="Create an account with a description and initial status.",
        operation_id="create_account",
        response_model=AccountResponse,
        status_code=201,
        error_codes=[ErrorCode.DESCRIPTION_LENGTH_INVALID],
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/accounts/{account_id}/phonenumbers",
        handler=get_account_phone_numbers,
        tags=_ACCOUNTS,
        summary="Get account phone numbers",
        description="Get an account with the phone numbers it owns, oldest first.",
        operation_id="get_account_phone_numbers",
        response_model=AccountPhoneNumbersResponse,
        error_codes=[ErrorCode.RESOURCE_NOT_FOUND],
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/accounts/{account_id}",
        handler=update_account,
        tags=_ACCOUNTS,
        summary="Update account status",
        description=(
            "Suspend or activate an account. Suspending detaches every owned "
            "phone number atomically; activating does not reattach them."
        ),
        operation_id="update_account",
        response_model=AccountResponse,
        error_codes=[ErrorCode.RESOURCE_NOT_FOUND],
    ),
    # phone numbers
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/phonenumbers",
        handler=create_phone_number,
        tags=_PHONE_NUMBERS,
        summary="Create phone number",
        description="Create a phone number, optionally attached to an active account.",
        operation_id="create_phone_number",
        response_model=PhoneNumberResponse,
        status_code=201,
        error_codes=[
            ErrorCode.PHONE_NUMBER_INVALID,
            ErrorCode.RESOURCE_NOT_FOUND,
            ErrorCode.PHONE_NUMBER_DUPLICATE,
            ErrorCode.ACCOUNT_SUSPENDED,
        ],
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/phonenumbers/{phone_number_id}",
        handler=get_phone_number,
        tags=_PHONE_NUMBERS,
        summary="Get phone number",
        operation_id="get_phone_number",
        response_model=PhoneNumberResponse,
        error_codes=[ErrorCode.RESOURCE_NOT_FOUND],
    ),
]
