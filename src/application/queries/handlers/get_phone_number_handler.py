"""GetPhoneNumber query handler."""

from src.application.dtos.account_dtos import PhoneNumberResult
from src.application.queries.phone_number_queries import GetPhoneNumber
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.phone_number_repository import PhoneNumberRepository


class GetPhoneNumberHandler:
    """Handler for GetPhoneNumber query."""

    def __init__(self, phone_number_repo: PhoneNumberRepository) -> None:
        self._phone_number_repo = phone_number_repo

    async def handle(
        self, query: GetPhoneNumber
    ) -> Result[PhoneNumberResult, DomainError]:
        phone_number = await self._phone_number_repo.find_by_id(query.phone_number_id)

        if phone_number is None:
            return Failure(
                error=DomainError.of(
                    ErrorCode.RESOURCE_NOT_FOUND,
                    details={"phone_number_id": str(query.phone_number_id)},
                )
            )

        return Success(value=PhoneNumberResult.from_entity(phone_number))
