"""Console logging adapter.

Owns the process-wide structlog configuration and writes one event per line
to stdout. API clients log through ``structlog.get_logger(...)`` and inherit
whatever this adapter configured.

Rendering:
- Development: colored key=value console output
- Testing/CI/Production: one JSON object per event

Implementation intentionally does NOT inherit from LoggerProtocol (PEP 544
structural subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _processors(*, use_json: bool) -> list[structlog.types.Processor]:
    """Processor chain shared by both renderers, renderer last."""
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        renderer,
    ]


def _error_context(error: Exception | None, context: dict[str, Any]) -> dict[str, Any]:
    if error is None:
        return context
    return context | {
        "error_type": type(error).__name__,
        "error_message": str(error),
    }


class ConsoleAdapter:
    """Structured stdout logger.

    Args:
        use_json (bool): JSON output when True, console output when False.
        level (str): Minimum level name, any case (e.g., "info").
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        structlog.configure(
            processors=_processors(use_json=use_json),
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelNamesMapping()[level.upper()]
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error event.

        Args:
            message (str): Event name (e.g., "conference_api_failed").
            error (Exception | None): Exception whose type and text are added
                as ``error_type``/``error_message``.
            **context: Structured key-value context.
        """
        self._logger.error(message, **_error_context(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical event; same ``error`` handling as error()."""
        self._logger.critical(message, **_error_context(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose events all carry ``context``.

        The receiver is left unchanged.
        """
        bound = ConsoleAdapter.__new__(ConsoleAdapter)
        bound._logger = self._logger.bind(**context)
        return bound
