"""Structured logger port.

Handlers and the HTTP layer log through this protocol; the concrete
adapter is chosen in ``src.core.container.get_logger``. Pass data as
keyword context rather than formatting it into the message:

    logger.info("Account status updated", account_id=str(account.id), status="suspended")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Message plus keyword context at five levels.

    ``error`` and ``critical`` accept the exception separately so adapters
    can record its type and text as fields.
    """

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Logger that adds ``context`` to every event; self is unchanged."""
        ...
