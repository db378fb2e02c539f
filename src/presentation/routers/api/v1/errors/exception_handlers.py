"""Exception handlers that turn framework errors into Problem Details.

Domain failures never reach these handlers; routers map them through
``ErrorResponseBuilder``. What lands here:

- ``HTTPException``: routing 404/405 and explicit aborts
- ``RequestValidationError``: malformed body, path or enum value (422)
- any other exception: an infrastructure fault, logged and answered with 500
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.routers.api.middleware.trace_middleware import TRACE_HEADER
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# status -> (title, problem type slug)
_STATUS_PROBLEMS: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
    503: ("Service Unavailable", "service-unavailable"),
}


def _problem_response(
    request: Request,
    status_code: int,
    detail: str,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    title, slug = _STATUS_PROBLEMS.get(status_code, ("Error", "error"))
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=request.url.path,
        errors=errors,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, HTTPException)
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _problem_response(
        request, exc.status_code, detail, headers=getattr(exc, "headers", None)
    )


def _field_errors(exc: RequestValidationError) -> list[ErrorDetail]:
    details = []
    for error in exc.errors():
        # ("body", "status") -> "status"
        parts = [str(part) for part in error.get("loc", ()) if part != "body"]
        details.append(
            ErrorDetail(
                field=".".join(parts) or "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )
    return details


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer request-shape problems with 422 and one entry per bad field.

    ``PATCH /api/v1/accounts/{id}`` with ``{"status": "closed"}`` yields
    ``errors == [{"field": "status", "code": "enum", ...}]``.
    """
    assert isinstance(exc, RequestValidationError)
    return _problem_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Request validation failed. Check 'errors' for details.",
        errors=_field_errors(exc) or None,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected exception and answer 500 without internals.

    Starlette renders this response outside TraceMiddleware, so the trace
    header is set here.
    """
    trace_id = getattr(request.state, "trace_id", None)
    get_logger().error(
        "Unhandled exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )
    return _problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please contact support with the trace ID.",
        headers={TRACE_HEADER: trace_id} if trace_id else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
