"""Conference API client.

HTTP client for the conference back-end. Implements ConferenceApiProtocol.

Endpoints:
    GET    /api/sessions                          - All sessions
    GET    /api/sessions/{id}                     - One session (404 -> absent)
    PUT    /api/sessions/{id}                     - Replace a session
    DELETE /api/sessions/{id}                     - Delete a session (404 -> success)
    GET    /api/speakers                          - All speakers
    GET    /api/speakers/{id}                     - One speaker (404 -> absent)
    POST   /api/attendees                         - Register an attendee
    GET    /api/attendees/{name}                  - One attendee (404 -> absent)
    GET    /api/attendees/{name}/sessions         - Attendee's personal agenda
    POST   /api/attendees/{name}/session/{id}     - Add to personal agenda
    DELETE /api/attendees/{name}/session/{id}     - Remove from agenda (404 -> success)
    POST   /api/search                            - Search sessions and speakers
    GET    /health                                - Liveness probe
"""

from urllib.parse import quote

import httpx

from src.core.constants import API_TIMEOUT_DEFAULT, HEALTHY_STATUS_TEXT
from src.core.result import Failure, Result, Success
from src.domain.errors import ApiClientError
from src.infrastructure.api.base_api_client import BaseApiClient, NotFoundPolicy
from src.infrastructure.api.json_codec import JsonCodec
from src.schemas.conference_schemas import (
    Attendee,
    SearchResult,
    SearchTerm,
    Session,
    Speaker,
)


def _segment(value: str) -> str:
    """Escape a value for use as a single URL path segment."""
    return quote(value, safe="")


class ConferenceApiClient(BaseApiClient):
    """HTTP client for the conference API.

    Every call is independent: nothing is cached and every response yields
    fresh model instances. Failures are returned after a single attempt.

    Example:
        >>> client = ConferenceApiClient(base_url="https://conf.example.com")
        >>> result = await client.get_session(42)
        >>> match result:
        ...     case Success(value=None):
        ...         print("No such session")
        ...     case Success(value=session):
        ...         print(session.title)
        ...     case Failure(error=error):
        ...         print(f"Error: {error.message}")
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = API_TIMEOUT_DEFAULT,
        codec: JsonCodec | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize conference API client.

        Args:
            base_url: Back-end base URL (e.g., "https://conf.example.com").
            timeout: HTTP transport timeout in seconds.
            codec: JSON codec. Defaults to a new JsonCodec.
            http_client: Shared httpx client for connection pooling.
        """
        super().__init__(
            base_url=base_url,
            service_name="conference",
            timeout=timeout,
            codec=codec,
            http_client=http_client,
        )

    # =========================================================================
    # Sessions
    # =========================================================================

    async def list_sessions(self) -> Result[list[Session], ApiClientError]:
        """Fetch all sessions.

        Returns:
            Success(list[Session]): Every session, in server order.
            Failure(UnexpectedStatusError): Any non-2xx status, 404 included.
            Failure(TransportError): Network failure or undecodable body.
        """
        return await self._fetch(
            path="/api/sessions",
            type_=list[Session],
            operation="list_sessions",
        )

    async def get_session(self, session_id: int) -> Result[Session | None, ApiClientError]:
        """Fetch a single session.

        Returns:
            Success(Session): The session.
            Success(None): No session with that id (HTTP 404).
            Failure(ApiClientError): Any other failure.
        """
        return await self._fetch(
            path=f"/api/sessions/{session_id}",
            type_=Session,
            operation="get_session",
            not_found=NotFoundPolicy.ABSENT,
        )

    async def put_session(self, session: Session) -> Result[None, ApiClientError]:
        """Replace a session with its full representation."""
        return await self._send(
            method="PUT",
            path=f"/api/sessions/{session.id}",
            operation="put_session",
            body=session,
        )

    async def delete_session(self, session_id: int) -> Result[None, ApiClientError]:
        """Delete a session.

        Idempotent: a 404 means the session is already gone and counts as
        success.
        """
        return await self._send(
            method="DELETE",
            path=f"/api/sessions/{session_id}",
            operation="delete_session",
            not_found=NotFoundPolicy.SUCCESS,
        )

    # =========================================================================
    # Speakers
    # =========================================================================

    async def list_speakers(self) -> Result[list[Speaker], ApiClientError]:
        """Fetch all speakers. Same failure policy as list_sessions."""
        return await self._fetch(
            path="/api/speakers",
            type_=list[Speaker],
            operation="list_speakers",
        )

    async def get_speaker(self, speaker_id: int) -> Result[Speaker | None, ApiClientError]:
        """Fetch a single speaker; Success(None) on 404."""
        return await self._fetch(
            path=f"/api/speakers/{speaker_id}",
            type_=Speaker,
            operation="get_speaker",
            not_found=NotFoundPolicy.ABSENT,
        )

    # =========================================================================
    # Attendees
    # =========================================================================

    async def add_attendee(self, attendee: Attendee) -> Result[None, ApiClientError]:
        """Register an attendee."""
        return await self._send(
            method="POST",
            path="/api/attendees",
            operation="add_attendee",
            body=attendee,
        )

    async def get_attendee(self, name: str) -> Result[Attendee | None, ApiClientError]:
        """Fetch an attendee by unique name.

        A blank name is answered with Success(None) without calling the
        service.

        Returns:
            Success(Attendee): The attendee.
            Success(None): Blank name, or no such attendee (HTTP 404).
            Failure(ApiClientError): Any other failure.
        """
        if not name or not name.strip():
            return Success(value=None)

        return await self._fetch(
            path=f"/api/attendees/{_segment(name)}",
            type_=Attendee,
            operation="get_attendee",
            not_found=NotFoundPolicy.ABSENT,
        )

    async def get_sessions_by_attendee(
        self, name: str
    ) -> Result[list[Session], ApiClientError]:
        """Fetch the sessions on an attendee's personal agenda."""
        return await self._fetch(
            path=f"/api/attendees/{_segment(name)}/sessions",
            type_=list[Session],
            operation="get_sessions_by_attendee",
        )

    async def add_session_to_attendee(
        self, name: str, session_id: int
    ) -> Result[None, ApiClientError]:
        """Add a session to an attendee's personal agenda."""
        return await self._send(
            method="POST",
            path=f"/api/attendees/{_segment(name)}/session/{session_id}",
            operation="add_session_to_attendee",
        )

    async def remove_session_from_attendee(
        self, name: str, session_id: int
    ) -> Result[None, ApiClientError]:
        """Remove a session from an attendee's personal agenda.

        Idempotent like delete_session: 404 counts as success.
        """
        return await self._send(
            method="DELETE",
            path=f"/api/attendees/{_segment(name)}/session/{session_id}",
            operation="remove_session_from_attendee",
            not_found=NotFoundPolicy.SUCCESS,
        )

    # =========================================================================
    # Search
    # =========================================================================

    async def search(self, query: str) -> Result[list[SearchResult], ApiClientError]:
        """Search sessions and speakers.

        The query is sent as-is, even when empty; whatever the service
        returns is passed through.
        """
        return await self._fetch(
            method="POST",
            path="/api/search",
            type_=list[SearchResult],
            operation="search",
            body=SearchTerm(query=query),
        )

    # =========================================================================
    # Health
    # =========================================================================

    async def check_health(self) -> Result[bool, ApiClientError]:
        """Probe the back-end health endpoint.

        Returns:
            Success(True): 2xx with body "Healthy".
            Success(False): Any other status or body.
            Failure(TransportError): Service unreachable.
        """
        result = await self._execute_request(
            method="GET", path="/health", operation="check_health"
        )
        if isinstance(result, Failure):
            return result

        response = result.value
        healthy = response.is_success and response.text.strip() == HEALTHY_STATUS_TEXT
        if not healthy:
            self._logger.warning(
                "conference_api_unhealthy",
                status_code=response.status_code,
            )
        return Success(value=healthy)
