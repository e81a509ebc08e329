"""Conference API client factory.

Page handlers depend on ConferenceApiProtocol; this factory decides which
implementation they get and how it is configured.

Usage:
    from src.core.container import get_conference_api_client

    client = get_conference_api_client()
    result = await client.list_sessions()
"""

from typing import TYPE_CHECKING

import httpx

from src.core.config import settings
from src.core.container.infrastructure import get_json_codec

if TYPE_CHECKING:
    from src.domain.protocols.conference_api_protocol import ConferenceApiProtocol


def get_conference_api_client(
    http_client: httpx.AsyncClient | None = None,
) -> "ConferenceApiProtocol":
    """Build a conference API client from settings.

    Not cached: the client is cheap and holds no state of its own. Pass a
    long-lived ``httpx.AsyncClient`` to share one connection pool across
    requests; its lifetime stays with the caller.

    Args:
        http_client: Optional shared httpx client.

    Returns:
        ConferenceApiProtocol: Client configured with the base URL and
        timeout from settings.
    """
    from src.infrastructure.api.conference_api_client import ConferenceApiClient

    return ConferenceApiClient(
        base_url=settings.conference_api_base_url,
        timeout=settings.conference_api_timeout,
        codec=get_json_codec(),
        http_client=http_client,
    )
