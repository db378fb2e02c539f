"""Shared kernel: Result type, error codes and the error catalog.

Imports nothing from the domain, application or presentation layers.
"""

from src.core.enums import ErrorCategory, ErrorCode
from src.core.errors import DomainError, get_error_definition
from src.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCategory",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
    "get_error_definition",
]
