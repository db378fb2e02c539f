"""Error response builder for RFC 7807 Problem Details.

Renders a Result at the transport boundary:
- Success: the value is passed through to the route's response mapper
- Failure: the DomainError code is looked up in the error catalog and
  rendered as Problem Details with the catalog's HTTP status

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from typing import Any, Callable, TypeVar

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.enums import ErrorCategory
from src.core.errors import DomainError, get_error_definition
from src.core.result import Failure, Result
from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails

T = TypeVar("T")

# Every ErrorCategory must have an entry (enforced by compliance test)
CATEGORY_STATUS: dict[ErrorCategory, int] = {
    ErrorCategory.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCategory.CONFLICT: status.HTTP_409_CONFLICT,
}

CATEGORY_TITLE: dict[ErrorCategory, str] = {
    ErrorCategory.VALIDATION: "Validation Failed",
    ErrorCategory.NOT_FOUND: "Resource Not Found",
    ErrorCategory.CONFLICT: "Resource Conflict",
}


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> error = DomainError.of(ErrorCode.RESOURCE_NOT_FOUND)
        >>> response = ErrorResponseBuilder.from_domain_error(
        ...     error=error,
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
        >>> # Returns 404 with ProblemDetails JSON
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert DomainError to RFC 7807 JSON response.

        Args:
            error: Domain error carried by a Failure
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with ProblemDetails content
        """
        definition = get_error_definition(error.code)
        status_code = CATEGORY_STATUS[definition.category]

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=CATEGORY_TITLE[definition.category],
            status=status_code,
            detail=definition.message,
            instance=str(request.url.path),
            code=error.code.value,
            message=definition.message,
            trace_id=trace_id,
        )

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def error_or_ok(
        result: Result[T, DomainError],
        request: Request,
        trace_id: str | None,
        to_response: Callable[[T], Any],
    ) -> Any:
        """Render a Result: Problem Details on failure, mapped value on success.

        Args:
            result: Handler result.
            request: FastAPI Request object.
            trace_id: Request trace ID.
            to_response: Maps the success value to the route's response.

        Returns:
            JSONResponse for failures, ``to_response(value)`` otherwise.
        """
        if isinstance(result, Failure):
            return ErrorResponseBuilder.from_domain_error(
                error=result.error,
                request=request,
                trace_id=trace_id,
            )
        return to_response(result.value)
