"""UpdateAccount command handler.

Applies the account status state machine:
- status omitted: no change, current account returned
- SUSPENDED: detach every owned phone number and suspend, atomically
  (also for an already suspended account, which changes nothing)
- ACTIVE: status flip only; phone numbers are NOT reattached
"""

from src.application.commands.account_commands import UpdateAccount
from src.application.dtos.account_dtos import AccountResult
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


class UpdateAccountHandler:
    """Handler for UpdateAccount command.

    Dependencies (injected via constructor):
        - AccountRepository: Lookup plus atomic suspend/activate
        - LoggerProtocol: For structured logging
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._logger = logger

    async def handle(self, cmd: UpdateAccount) -> Result[AccountResult, DomainError]:
        """Handle UpdateAccount command.

        Args:
            cmd: UpdateAccount command.

        Returns:
            Success(AccountResult): Account after the update.
            Failure(DomainError): RESOURCE_NOT_FOUND.
        """
        account = await self._account_repo.find_by_id(cmd.account_id)
        if account is None:
            return self._not_found(cmd)

        if cmd.status is None:
            return Success(value=AccountResult.from_entity(account))

        updated: Account | None
        if cmd.status.detaches_phone_numbers():
            updated = await self._account_repo.suspend(cmd.account_id)
        else:
            updated = await self._account_repo.activate(cmd.account_id)

        # Row may have disappeared between the lookup and the locked update
        if updated is None:
            return self._not_found(cmd)

        self._logger.info(
            "Account status updated",
            account_id=str(updated.id),
            previous_status=account.status.value,
            status=updated.status.value,
        )
        return Success(value=AccountResult.from_entity(updated))

    def _not_found(self, cmd: UpdateAccount) -> Failure[DomainError]:
        self._logger.info(
            "Account not found",
            account_id=str(cmd.account_id),
            error_code=ErrorCode.RESOURCE_NOT_FOUND.value,
        )
        return Failure(
            error=DomainError.of(
                ErrorCode.RESOURCE_NOT_FOUND,
                details={"account_id": str(cmd.account_id)},
            )
        )
