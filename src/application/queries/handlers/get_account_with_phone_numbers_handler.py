"""GetAccountWithPhoneNumbers query handler.

Returns the account plus the phone numbers it owns, in creation order.
Returns DTO (not domain entity) to prevent leaking domain to presentation.
"""

from src.application.dtos.account_dtos import AccountWithPhoneNumbersResult
from src.application.queries.account_queries import GetAccountWithPhoneNumbers
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.account_repository import AccountRepository


class GetAccountWithPhoneNumbersHandler:
    """Handler for GetAccountWithPhoneNumbers query.

    Dependencies (injected via constructor):
        - AccountRepository: For account and phone number retrieval
    """

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    async def handle(
        self, query: GetAccountWithPhoneNumbers
    ) -> Result[AccountWithPhoneNumbersResult, DomainError]:
        """Handle GetAccountWithPhoneNumbers query.

        Args:
            query: GetAccountWithPhoneNumbers query.

        Returns:
            Success(AccountWithPhoneNumbersResult): Account found.
            Failure(DomainError): RESOURCE_NOT_FOUND.
        """
        account = await self._account_repo.find_with_phone_numbers(query.account_id)

        if account is None:
            return Failure(
                error=DomainError.of(
                    ErrorCode.RESOURCE_NOT_FOUND,
                    details={"account_id": str(query.account_id)},
                )
            )

        return Success(value=AccountWithPhoneNumbersResult.from_entity(account))
