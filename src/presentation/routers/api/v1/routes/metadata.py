"""Declarative description of one API endpoint.

``ROUTE_REGISTRY`` (registry.py) is a list of these; ``generator.py`` turns
each entry into a FastAPI route with its OpenAPI error responses derived
from ``error_codes``.
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel

from src.core.enums import ErrorCode


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Everything needed to mount and document an endpoint.

    Attributes:
        method: HTTP verb.
        path: Path below the version prefix, e.g. "/accounts/{account_id}".
        handler: Async endpoint function from accounts.py or phone_numbers.py.
        tags: OpenAPI grouping.
        summary: One-line OpenAPI summary.
        description: Longer OpenAPI text.
        operation_id: Stable id for generated clients.
        response_model: Success body schema.
        status_code: Success status (201 for creation).
        error_codes: Catalog codes the endpoint may answer with.
    """

    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]
    tags: Sequence[str]
    summary: str
    description: str | None = None
    operation_id: str | None = None
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    error_codes: Sequence[ErrorCode] = field(default_factory=tuple)
