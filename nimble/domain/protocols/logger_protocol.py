"""LoggerProtocol: the structured logger discovery and binding write to.

Events are a short constant message plus key-value context, never an
interpolated string, so they stay searchable:

    logger.debug("Found module", module="app.users.UsersModule")
    logger.warning(
        "Endpoint module not discovered, endpoint skipped",
        endpoint="app.reports.Monthly",
        module="app.reports.ReportsModule",
    )

Levels used by Nimble: DEBUG per module, INFO for the discovery and binding
summaries, WARNING for skipped endpoints, ERROR when binding fails.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structural type for logging adapters (see ConsoleAdapter)."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at ERROR.

        Args:
            message: Constant event name.
            error: Exception whose type and message are added to the context.
            **context: Structured fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Logger that adds ``context`` to every event; self is unchanged."""
        ...
