"""Enums shared by every layer."""

from src.core.enums.environment import Environment
from src.core.enums.error_category import ErrorCategory
from src.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCategory", "ErrorCode"]
