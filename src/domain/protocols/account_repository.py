"""AccountRepository protocol for account persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.account import Account


class AccountRepository(Protocol):
    """Account repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Infrastructure faults (connection loss, driver errors) are raised, not
    returned; callers let them propagate.

    Methods:
        save: Persist a new account
        find_by_id: Retrieve account without phone numbers
        find_with_phone_numbers: Retrieve account with owned phone numbers
        suspend: Detach all owned phone numbers and suspend (atomic)
        activate: Set status to active
    """

    async def save(self, account: Account) -> Account:
        """Persist a new account.

        Args:
            account: Account entity with a pre-generated id.

        Returns:
            The stored account (timestamps as persisted).
        """
        ...

    async def find_by_id(
        self, account_id: UUID, *, for_update: bool = False
    ) -> Account | None:
        """Find account by ID (phone numbers not loaded).

        Args:
            account_id: Account's unique identifier.
            for_update: Lock the row until the current transaction ends.

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def find_with_phone_numbers(self, account_id: UUID) -> Account | None:
        """Find account by ID with its phone numbers in creation order.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Account with ``phone_numbers`` populated, None if not found.
        """
        ...

    async def suspend(self, account_id: UUID) -> Account | None:
        """Detach every owned phone number and set status to suspended.

        Both writes happen in a single transaction: either both commit or
        neither does. Calling this on an already suspended account succeeds
        and changes nothing.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Updated account (with empty ``phone_numbers``), None if not found.
        """
        ...

    async def activate(self, account_id: UUID) -> Account | None:
        """Set status to active. Phone numbers are not reattached.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Updated account, None if not found.
        """
        ...
