"""ConferenceApiProtocol for the remote conference back-end.

Port (interface) for hexagonal architecture. Page handlers depend on this
protocol; ``src/infrastructure/api/conference_api_client.py`` implements it
without inheriting from it.

Result conventions:
    - Single-resource lookups return ``Success(value=None)`` when the
      resource does not exist (HTTP 404). Absent is not an error.
    - Deletes are idempotent: removing something already gone succeeds.
    - Everything else that goes wrong is ``Failure(ApiClientError)``.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from src.core.result import Result
    from src.domain.errors import ApiClientError
    from src.schemas.conference_schemas import (
        Attendee,
        SearchResult,
        Session,
        Speaker,
    )


class ConferenceApiProtocol(Protocol):
    """Asynchronous client for the conference API."""

    async def list_sessions(self) -> "Result[list[Session], ApiClientError]":
        """Fetch every session. 404 is an error."""
        ...

    async def get_session(
        self, session_id: int
    ) -> "Result[Session | None, ApiClientError]":
        """Fetch one session; None if it does not exist."""
        ...

    async def put_session(self, session: "Session") -> "Result[None, ApiClientError]":
        """Replace a session with the given full representation."""
        ...

    async def delete_session(self, session_id: int) -> "Result[None, ApiClientError]":
        """Delete a session; succeeds if it is already gone."""
        ...

    async def list_speakers(self) -> "Result[list[Speaker], ApiClientError]":
        """Fetch every speaker. 404 is an error."""
        ...

    async def get_speaker(
        self, speaker_id: int
    ) -> "Result[Speaker | None, ApiClientError]":
        """Fetch one speaker; None if it does not exist."""
        ...

    async def add_attendee(self, attendee: "Attendee") -> "Result[None, ApiClientError]":
        """Register an attendee."""
        ...

    async def get_attendee(self, name: str) -> "Result[Attendee | None, ApiClientError]":
        """Fetch an attendee by name; None if blank or unknown."""
        ...

    async def search(self, query: str) -> "Result[list[SearchResult], ApiClientError]":
        """Search sessions and speakers."""
        ...

    async def get_sessions_by_attendee(
        self, name: str
    ) -> "Result[list[Session], ApiClientError]":
        """Fetch the sessions on an attendee's personal agenda."""
        ...

    async def add_session_to_attendee(
        self, name: str, session_id: int
    ) -> "Result[None, ApiClientError]":
        """Add a session to an attendee's personal agenda."""
        ...

    async def remove_session_from_attendee(
        self, name: str, session_id: int
    ) -> "Result[None, ApiClientError]":
        """Remove a session from an attendee's personal agenda (idempotent)."""
        ...

    async def check_health(self) -> "Result[bool, ApiClientError]":
        """Report whether the back-end considers itself healthy."""
        ...
