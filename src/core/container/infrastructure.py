"""Infrastructure dependency factories.

Cached factories for process-wide services. Adapter selection is
centralized here (composition root).

Usage:
    from src.core.container import get_logger

    logger = get_logger()
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.infrastructure.api.json_codec import JsonCodec


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )
    return ConsoleAdapter(use_json=env != "development", level=settings.log_level)


@lru_cache()
def get_json_codec() -> "JsonCodec":
    """Return the shared JSON codec (stateless)."""
    from src.infrastructure.api.json_codec import JsonCodec

    return JsonCodec()
