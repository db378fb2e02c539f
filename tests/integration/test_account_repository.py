"""Integration tests for AccountRepository and PhoneNumberRepository.

Tests cover:
- Save and retrieve account (with and without phone numbers)
- Phone numbers returned in creation order
- Atomic suspension (bulk detach + status write, one commit)
- Rollback when the suspension commit fails
- Activation does not reattach phone numbers
- Unique phone number enforcement

Architecture:
- Integration tests with a REAL SQLAlchemy engine (in-memory SQLite)
- Uses test_database fixture (fresh instance per test)
"""

from datetime import UTC, datetime, timedelta
from typing import cast
from unittest.mock import AsyncMock, patch
from uuid import UUID

import pytest
from sqlalchemy import func, select
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.entities.account import Account
from src.domain.entities.phone_number import PhoneNumber
from src.domain.enums.account_status import AccountStatus
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.models.phone_number import (
    PhoneNumber as PhoneNumberModel,
)
from src.infrastructure.persistence.repositories import (
    AccountRepository,
    PhoneNumberRepository,
)


# =============================================================================
# Test Helpers
# =============================================================================


def create_test_account(
    status: AccountStatus = AccountStatus.ACTIVE,
    description: str = "John Doe",
) -> Account:
    return Account(id=cast(UUID, uuid7()), description=description, status=status)


def create_test_phone_number(
    number: str,
    account_id: UUID | None = None,
    created_at: datetime | None = None,
) -> PhoneNumber:
    now = created_at or datetime.now(UTC)
    return PhoneNumber(
        id=cast(UUID, uuid7()),
        number=number,
        account_id=account_id,
        created_at=now,
        updated_at=now,
    )


async def _seed_account_with_numbers(
    database: Database, numbers: list[str]
) -> Account:
    account = create_test_account()
    base = datetime(2026, 1, 1, tzinfo=UTC)
    async with database.get_session() as session:
        await AccountRepository(session).save(account)
        phone_repo = PhoneNumberRepository(session)
        for offset, number in enumerate(numbers):
            result = await phone_repo.save(
                create_test_phone_number(
                    number, account.id, created_at=base + timedelta(seconds=offset)
                )
            )
            assert isinstance(result, Success)
    return account


# =============================================================================
# Account Persistence
# =============================================================================


@pytest.mark.integration
class TestAccountRepositoryPersistence:
    @pytest.mark.asyncio
    async def test_save_and_find_by_id(self, test_database: Database):
        account = create_test_account(description="Acme Corp")

        async with test_database.get_session() as session:
            await AccountRepository(session).save(account)

        async with test_database.get_session() as session:
            found = await AccountRepository(session).find_by_id(account.id)

        assert found is not None
        assert found.id == account.id
        assert found.description == "Acme Corp"
        assert found.status == AccountStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_find_unknown_account_returns_none(self, test_database: Database):
        async with test_database.get_session() as session:
            repo = AccountRepository(session)
            unknown = cast(UUID, uuid7())

            assert await repo.find_by_id(unknown) is None
            assert await repo.find_with_phone_numbers(unknown) is None
            assert await repo.suspend(unknown) is None
            assert await repo.activate(unknown) is None

    @pytest.mark.asyncio
    async def test_find_with_phone_numbers_in_creation_order(
        self, test_database: Database
    ):
        account = await _seed_account_with_numbers(
            test_database, ["3333333333", "1111111111", "2222222222"]
        )

        async with test_database.get_session() as session:
            found = await AccountRepository(session).find_with_phone_numbers(account.id)

        assert found is not None
        assert [p.number for p in found.phone_numbers] == [
            "3333333333",
            "1111111111",
            "2222222222",
        ]
        assert all(p.account_id == account.id for p in found.phone_numbers)

    @pytest.mark.asyncio
    async def test_find_with_phone_numbers_excludes_other_accounts(
        self, test_database: Database
    ):
        first = await _seed_account_with_numbers(test_database, ["1111111111"])
        await _seed_account_with_numbers(test_database, ["2222222222"])

        async with test_database.get_session() as session:
            found = await AccountRepository(session).find_with_phone_numbers(first.id)

        assert found is not None
        assert [p.number for p in found.phone_numbers] == ["1111111111"]


# =============================================================================
# Status Transitions
# =============================================================================


@pytest.mark.integration
class TestAccountRepositoryStatusTransitions:
    @pytest.mark.asyncio
    async def test_suspend_detaches_all_phone_numbers(self, test_database: Database):
        # Arrange
        account = await _seed_account_with_numbers(
            test_database, ["1111111111", "2222222222", "3333333333"]
        )

        # Act
        async with test_database.get_session() as session:
            suspended = await AccountRepository(session).suspend(account.id)

        # Assert
        assert suspended is not None
        assert suspended.status == AccountStatus.SUSPENDED
        async with test_database.get_session() as session:
            found = await AccountRepository(session).find_with_phone_numbers(account.id)
            attached = await session.scalar(
                select(func.count())
                .select_from(PhoneNumberModel)
                .where(PhoneNumberModel.account_id.is_not(None))
            )
            total = await session.scalar(
                select(func.count()).select_from(PhoneNumberModel)
            )

        assert found is not None
        assert found.status == AccountStatus.SUSPENDED
        assert found.phone_numbers == []
        assert attached == 0
        # Detached, never deleted
        assert total == 3

    @pytest.mark.asyncio
    async def test_suspend_account_without_phone_numbers(
        self, test_database: Database
    ):
        account = await _seed_account_with_numbers(test_database, [])

        async with test_database.get_session() as session:
            suspended = await AccountRepository(session).suspend(account.id)

        assert suspended is not None
        assert suspended.status == AccountStatus.SUSPENDED

    @pytest.mark.asyncio
    async def test_suspend_is_idempotent(self, test_database: Database):
        account = await _seed_account_with_numbers(test_database, ["1111111111"])

        async with test_database.get_session() as session:
            await AccountRepository(session).suspend(account.id)
        async with test_database.get_session() as session:
            again = await AccountRepository(session).suspend(account.id)

        assert again is not None
        assert again.status == AccountStatus.SUSPENDED

    @pytest.mark.asyncio
    async def test_failed_commit_leaves_account_and_numbers_unchanged(
        self, test_database: Database
    ):
        """Detachment and status write are rolled back together."""
        # Arrange
        account = await _seed_account_with_numbers(
            test_database, ["1111111111", "2222222222"]
        )

        # Act
        with pytest.raises(RuntimeError):
            async with test_database.get_session() as session:
                with patch.object(
                    session,
                    "commit",
                    AsyncMock(side_effect=RuntimeError("connection lost")),
                ):
                    await AccountRepository(session).suspend(account.id)

        # Assert
        async with test_database.get_session() as session:
            found = await AccountRepository(session).find_with_phone_numbers(account.id)

        assert found is not None
        assert found.status == AccountStatus.ACTIVE
        assert [p.number for p in found.phone_numbers] == ["1111111111", "2222222222"]

    @pytest.mark.asyncio
    async def test_activate_does_not_reattach_phone_numbers(
        self, test_database: Database
    ):
        account = await _seed_account_with_numbers(test_database, ["1111111111"])
        async with test_database.get_session() as session:
            await AccountRepository(session).suspend(account.id)

        async with test_database.get_session() as session:
            activated = await AccountRepository(session).activate(account.id)
        async with test_database.get_session() as session:
            found = await AccountRepository(session).find_with_phone_numbers(account.id)

        assert activated is not None
        assert activated.status == AccountStatus.ACTIVE
        assert found is not None
        assert found.phone_numbers == []


# =============================================================================
# Phone Numbers
# =============================================================================


@pytest.mark.integration
class TestPhoneNumberRepository:
    @pytest.mark.asyncio
    async def test_save_and_find_unattached(self, test_database: Database):
        phone_number = create_test_phone_number("0987654321")

        async with test_database.get_session() as session:
            result = await PhoneNumberRepository(session).save(phone_number)
        async with test_database.get_session() as session:
            found = await PhoneNumberRepository(session).find_by_id(phone_number.id)

        assert isinstance(result, Success)
        assert found is not None
        assert found.number == "0987654321"
        assert found.account_id is None

    @pytest.mark.asyncio
    async def test_duplicate_number_is_a_conflict(self, test_database: Database):
        # Arrange
        async with test_database.get_session() as session:
            await PhoneNumberRepository(session).save(
                create_test_phone_number("1234567890")
            )

        # Act
        async with test_database.get_session() as session:
            repo = PhoneNumberRepository(session)
            result = await repo.save(create_test_phone_number("1234567890"))
            # Session stays usable after the rolled back insert
            other = await repo.save(create_test_phone_number("1234567891"))

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PHONE_NUMBER_DUPLICATE
        assert isinstance(other, Success)
        async with test_database.get_session() as session:
            count = await session.scalar(
                select(func.count())
                .select_from(PhoneNumberModel)
                .where(PhoneNumberModel.number == "1234567890")
            )
        assert count == 1

    @pytest.mark.asyncio
    async def test_find_unknown_phone_number_returns_none(
        self, test_database: Database
    ):
        async with test_database.get_session() as session:
            found = await PhoneNumberRepository(session).find_by_id(
                cast(UUID, uuid7())
            )

        assert found is None
