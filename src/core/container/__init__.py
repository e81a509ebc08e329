"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_conference_api_client

Modules:
- infrastructure: Process-wide services (logging, JSON codec)
- api_clients: Conference API client factory
"""

from src.core.container.api_clients import get_conference_api_client
from src.core.container.infrastructure import get_json_codec, get_logger

__all__ = [
    "get_conference_api_client",
    "get_json_codec",
    "get_logger",
]
