"""Core errors package.

Exports the domain error payload and the error catalog.

Usage:
    from src.core.errors import DomainError, get_error_definition
"""

from src.core.errors.domain_error import DomainError
from src.core.errors.error_catalog import (
    ERROR_CATALOG,
    ErrorDefinition,
    get_error_definition,
)

__all__ = [
    "DomainError",
    "ERROR_CATALOG",
    "ErrorDefinition",
    "get_error_definition",
]
