"""Domain enums for business logic.

Enums are centralized here for discoverability.

Available Enums:
    - AccountStatus: Account lifecycle states (active, suspended)
"""

from src.domain.enums.account_status import AccountStatus

__all__ = [
    "AccountStatus",
]
