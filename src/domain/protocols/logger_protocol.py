"""LoggerProtocol definition for structured logging.

Standardizes structured logging while remaining backend-agnostic. Every
call is a short event name plus key-value context.

Log Levels:
    - DEBUG: Request/response tracing
    - INFO: Normal operational events
    - WARNING: A call failed or the back-end looks unhealthy
    - ERROR: Operation failed, process continues
    - CRITICAL: Process cannot continue

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    page_logger = logger.bind(page="agenda", day_offset=day_offset)
    page_logger.info("agenda_rendered", slot_count=len(agenda.time_slots))
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is left unchanged.
        """
        ...
