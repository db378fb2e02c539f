"""PhoneNumberRepository protocol for phone number persistence.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities.phone_number import PhoneNumber


class PhoneNumberRepository(Protocol):
    """Phone number repository protocol (port).

    Methods:
        save: Insert a new phone number (uniqueness enforced by storage)
        find_by_id: Retrieve phone number by ID
    """

    async def save(self, phone_number: PhoneNumber) -> Result[PhoneNumber, DomainError]:
        """Insert a new phone number and commit.

        Uniqueness of ``number`` is enforced by the storage unique
        constraint, never by a prior lookup.

        Args:
            phone_number: Entity with a pre-generated id.

        Returns:
            Success(PhoneNumber): Stored phone number.
            Failure(DomainError): PHONE_NUMBER_DUPLICATE when the number exists.
        """
        ...

    async def find_by_id(self, phone_number_id: UUID) -> PhoneNumber | None:
        """Find phone number by ID.

        Args:
            phone_number_id: Phone number's unique identifier.

        Returns:
            PhoneNumber if found, None otherwise.
        """
        ...
