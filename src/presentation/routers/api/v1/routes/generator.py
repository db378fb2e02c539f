"""Mounts ``RouteMetadata`` entries on an ``APIRouter``."""

from collections.abc import Sequence
from typing import Any

from fastapi import APIRouter, status

from src.core.enums import ErrorCode
from src.core.errors import get_error_definition
from src.presentation.routers.api.v1.errors.error_response_builder import (
    CATEGORY_STATUS,
)
from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from src.presentation.routers.api.v1.routes.metadata import RouteMetadata


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    for entry in registry:
        router.add_api_route(
            path=entry.path,
            endpoint=entry.handler,
            methods=[entry.method.value],
            response_model=entry.response_model,
            status_code=entry.status_code,
            tags=list(entry.tags),
            summary=entry.summary,
            description=entry.description,
            operation_id=entry.operation_id,
            responses=build_responses(entry.error_codes),
        )


def build_responses(
    error_codes: Sequence[ErrorCode],
) -> dict[int | str, dict[str, Any]]:
    """OpenAPI ``responses`` for a route's catalog codes.

    Codes that share an HTTP status are joined into one description, and
    422 (request validation) is always present.

    Example:
        >>> sorted(build_responses([ErrorCode.RESOURCE_NOT_FOUND]))
        [404, 422]
    """
    by_status: dict[int, list[str]] = {}
    for code in error_codes:
        definition = get_error_definition(code)
        by_status.setdefault(CATEGORY_STATUS[definition.category], []).append(
            f"{code.value}: {definition.message}"
        )

    responses: dict[int | str, dict[str, Any]] = {
        status_code: {"description": "; ".join(lines), "model": ProblemDetails}
        for status_code, lines in sorted(by_status.items())
    }
    responses[status.HTTP_422_UNPROCESSABLE_ENTITY] = {
        "description": "Request validation failed",
        "model": ProblemDetails,
    }
    return responses
