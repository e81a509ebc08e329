"""Conference back-end API adapters.

Usage:
    from src.infrastructure.api import ConferenceApiClient
"""

from src.infrastructure.api.base_api_client import BaseApiClient, NotFoundPolicy
from src.infrastructure.api.conference_api_client import ConferenceApiClient
from src.infrastructure.api.json_codec import JsonCodec

__all__ = [
    "BaseApiClient",
    "ConferenceApiClient",
    "JsonCodec",
    "NotFoundPolicy",
]
