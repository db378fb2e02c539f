"""Unit tests for TraceMiddleware (request tracing).

Tests cover:
- Trace ID generation for new requests
- Trace ID reuse from the X-Trace-Id header
- request.state and structlog context propagation
- get_trace_id() outside a request
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
import structlog

from src.presentation.routers.api.middleware.trace_middleware import (
    TRACE_HEADER,
    TraceMiddleware,
    get_trace_id,
)


def _request(headers: dict[str, str]) -> MagicMock:
    request = MagicMock()
    request.headers = headers
    return request


@pytest.mark.unit
class TestTraceMiddleware:
    @pytest.mark.asyncio
    async def test_generates_new_trace_id_when_missing(self):
        response = MagicMock()
        response.headers = {}
        middleware = TraceMiddleware(app=MagicMock())

        result = await middleware.dispatch(_request({}), AsyncMock(return_value=response))

        UUID(result.headers[TRACE_HEADER])  # Raises ValueError if invalid

    @pytest.mark.asyncio
    async def test_uses_existing_trace_id_from_header(self):
        existing = "12345678-1234-5678-1234-567812345678"
        request = _request({TRACE_HEADER: existing})
        response = MagicMock()
        response.headers = {}
        middleware = TraceMiddleware(app=MagicMock())

        result = await middleware.dispatch(request, AsyncMock(return_value=response))

        assert result.headers[TRACE_HEADER] == existing
        assert request.state.trace_id == existing

    @pytest.mark.asyncio
    async def test_trace_id_visible_during_request_and_cleared_after(self):
        seen: dict[str, object] = {}
        response = MagicMock()
        response.headers = {}

        async def call_next(request):
            seen["trace_id"] = get_trace_id()
            seen["structlog"] = structlog.contextvars.get_contextvars().get("trace_id")
            return response

        middleware = TraceMiddleware(app=MagicMock())
        await middleware.dispatch(_request({TRACE_HEADER: "trace-1"}), call_next)

        assert seen == {"trace_id": "trace-1", "structlog": "trace-1"}
        assert get_trace_id() is None
        assert "trace_id" not in structlog.contextvars.get_contextvars()

    def test_get_trace_id_outside_request_is_none(self):
        assert get_trace_id() is None
