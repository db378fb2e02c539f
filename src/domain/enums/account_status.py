"""Account lifecycle states.

Defines the status state machine for telephony accounts.

State Machine:
    ACTIVE ↔ SUSPENDED (self-transitions allowed)

    - ACTIVE: Account may own phone numbers
    - SUSPENDED: Account owns no phone numbers

Usage:
    from src.domain.enums import AccountStatus

    if account.status == AccountStatus.SUSPENDED:
        # Phone numbers cannot be assigned
"""

from enum import Enum


class AccountStatus(str, Enum):
    """Account lifecycle states.

    String Enum:
        Inherits from str for easy serialization and database storage.
        Values are lowercase for consistency.

    State Transitions:
        ACTIVE → SUSPENDED: Detaches every owned phone number (atomic)
        SUSPENDED → ACTIVE: Status flip only, no reattachment
        ACTIVE → ACTIVE: No-op beyond re-persisting the status
        SUSPENDED → SUSPENDED: No-op (numbers already detached)
    """

    ACTIVE = "active"
    """Account in good standing; may own phone numbers."""

    SUSPENDED = "suspended"
    """Account suspended; owns no phone numbers.

    Entering this state clears the account reference of every phone
    number the account owned at that instant.
    """

    @classmethod
    def _missing_(cls, value: object) -> "AccountStatus | None":
        # Accept "Active" / "SUSPENDED" as well as the canonical lowercase values
        if isinstance(value, str):
            for status in cls:
                if status.value == value.lower():
                    return status
        return None

    def detaches_phone_numbers(self) -> bool:
        """Whether entering this status detaches owned phone numbers."""
        return self is AccountStatus.SUSPENDED
