"""Error categories (transport status classification).

Every catalog entry carries exactly one category. The presentation layer maps
categories to HTTP status codes; the domain never knows about HTTP.
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """Classification of expected failures."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
