"""CreateAccount command handler.

Flow:
1. Validate description length (1-1023 characters)
2. Build Account entity with a fresh uuid7 id
3. Persist via AccountRepository
4. Return Success(AccountResult)

No persistence happens when validation fails.
"""

from uuid_extensions import uuid7

from src.application.commands.account_commands import CreateAccount
from src.application.dtos.account_dtos import AccountResult
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.validators.functions import is_valid_description


class CreateAccountHandler:
    """Handler for CreateAccount command.

    Dependencies (injected via constructor):
        - AccountRepository: For persistence
        - LoggerProtocol: For structured logging
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            account_repo: Account repository.
            logger: Logger protocol implementation from container.
        """
        self._account_repo = account_repo
        self._logger = logger

    async def handle(self, cmd: CreateAccount) -> Result[AccountResult, DomainError]:
        """Handle CreateAccount command.

        Args:
            cmd: CreateAccount command.

        Returns:
            Success(AccountResult): Account created.
            Failure(DomainError): DESCRIPTION_LENGTH_INVALID.
        """
        if not is_valid_description(cmd.description):
            self._logger.info(
                "Account creation rejected",
                error_code=ErrorCode.DESCRIPTION_LENGTH_INVALID.value,
                description_length=len(cmd.description),
            )
            return Failure(error=DomainError.of(ErrorCode.DESCRIPTION_LENGTH_INVALID))

        account = Account(
            id=uuid7(),
            description=cmd.description,
            status=cmd.status,
        )
        saved = await self._account_repo.save(account)

        self._logger.info(
            "Account created",
            account_id=str(saved.id),
            status=saved.status.value,
        )
        return Success(value=AccountResult.from_entity(saved))
