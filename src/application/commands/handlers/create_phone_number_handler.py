"""CreatePhoneNumber command handler.

Flow:
1. Validate number via PhoneNumberValidatorProtocol
2. If an account is given, read it under a row lock:
   absent -> RESOURCE_NOT_FOUND, suspended -> ACCOUNT_SUSPENDED
3. Insert; the unique index on number decides duplicates
   (PHONE_NUMBER_DUPLICATE is forwarded unchanged from the repository)

The account lock and the insert share the request session, so a concurrent
suspension cannot slip in between the status check and the insert.
"""

from uuid_extensions import uuid7

from src.application.commands.phone_number_commands import CreatePhoneNumber
from src.application.dtos.account_dtos import PhoneNumberResult
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.phone_number import PhoneNumber
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.phone_number_repository import PhoneNumberRepository
from src.domain.protocols.phone_number_validator_protocol import (
    PhoneNumberValidatorProtocol,
)


class CreatePhoneNumberHandler:
    """Handler for CreatePhoneNumber command.

    Dependencies (injected via constructor):
        - PhoneNumberRepository: Insert with unique-constraint semantics
        - AccountRepository: Locked lookup of the owning account
        - PhoneNumberValidatorProtocol: Number format check
        - LoggerProtocol: For structured logging
    """

    def __init__(
        self,
        phone_number_repo: PhoneNumberRepository,
        account_repo: AccountRepository,
        validator: PhoneNumberValidatorProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._phone_number_repo = phone_number_repo
        self._account_repo = account_repo
        self._validator = validator
        self._logger = logger

    async def handle(
        self, cmd: CreatePhoneNumber
    ) -> Result[PhoneNumberResult, DomainError]:
        """Handle CreatePhoneNumber command.

        Args:
            cmd: CreatePhoneNumber command.

        Returns:
            Success(PhoneNumberResult): Phone number created.
            Failure(DomainError): PHONE_NUMBER_INVALID, RESOURCE_NOT_FOUND,
                ACCOUNT_SUSPENDED or PHONE_NUMBER_DUPLICATE.
        """
        if not self._validator.is_valid(cmd.number):
            return Failure(error=DomainError.of(ErrorCode.PHONE_NUMBER_INVALID))

        if cmd.account_id is not None:
            account = await self._account_repo.find_by_id(
                cmd.account_id, for_update=True
            )
            if account is None:
                return Failure(
                    error=DomainError.of(
                        ErrorCode.RESOURCE_NOT_FOUND,
                        details={"account_id": str(cmd.account_id)},
                    )
                )
            if not account.can_own_phone_numbers():
                return Failure(
                    error=DomainError.of(
                        ErrorCode.ACCOUNT_SUSPENDED,
                        details={"account_id": str(cmd.account_id)},
                    )
                )

        phone_number = PhoneNumber(
            id=uuid7(),
            number=cmd.number,
            account_id=cmd.account_id,
        )
        result = await self._phone_number_repo.save(phone_number)

        if isinstance(result, Failure):
            self._logger.warning(
                "Phone number creation failed",
                error_code=result.error.code.value,
            )
            return result

        self._logger.info(
            "Phone number created",
            phone_number_id=str(result.value.id),
            account_id=str(cmd.account_id) if cmd.account_id else None,
        )
        return Success(value=PhoneNumberResult.from_entity(result.value))
