"""HTTP error rendering for API v1.

Failures leave the application layer as DomainError values and are rendered
here as RFC 7807 problem details carrying the catalog ``code`` and
``message``. Unhandled exceptions and request-shape errors get the same body
shape from the global exception handlers.

Exports:
    CATEGORY_STATUS: ErrorCategory -> HTTP status (exhaustive)
    ErrorResponseBuilder: Result/DomainError -> JSONResponse
    register_exception_handlers: Install 404/405, 422 and 500 handlers
    ErrorDetail, ProblemDetails: Response body models
"""

from src.presentation.routers.api.v1.errors.error_response_builder import (
    CATEGORY_STATUS,
    ErrorResponseBuilder,
)
from src.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "CATEGORY_STATUS",
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
