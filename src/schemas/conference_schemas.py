"""Conference wire schemas.

Pydantic models for the conference API payloads. The same models are used to
decode responses and to encode request bodies, so every field has a
snake_case Python name and a camelCase wire alias (``start_time`` <->
``startTime``). Both names are accepted on input.

Models are frozen. Embedded ``Track`` and ``Speaker`` values on a ``Session``
are owned copies parsed from the payload, never shared references, and a
fresh set of objects is created for every fetch.

Endpoints using these models:
    GET  /api/sessions, /api/sessions/{id}     -> Session
    PUT  /api/sessions/{id}                    <- Session
    GET  /api/speakers, /api/speakers/{id}     -> Speaker
    POST /api/attendees                        <- Attendee
    GET  /api/attendees/{name}                 -> Attendee
    POST /api/search                           <- SearchTerm, -> list[SearchResult]
"""

from datetime import timedelta
from typing import Annotated, Literal

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ConferenceModel(BaseModel):
    """Base for all conference payloads (camelCase on the wire, immutable)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# =============================================================================
# Reference values
# =============================================================================


class Track(ConferenceModel):
    """Track a session belongs to (e.g., "Web", "Data")."""

    id: int = Field(..., description="Track identifier")
    name: str = Field(..., description="Track display name")
    conference_id: int | None = Field(None, description="Owning conference")


class Speaker(ConferenceModel):
    """Speaker presenting one or more sessions."""

    id: int = Field(..., description="Speaker identifier")
    name: str = Field(..., description="Speaker display name")
    bio: str | None = Field(None, description="Short biography")
    web_site: str | None = Field(None, description="Personal web site URL")


# =============================================================================
# Session
# =============================================================================


class Session(ConferenceModel):
    """A scheduled conference session.

    Attributes:
        id: Session identifier.
        title: Session title.
        abstract: Plain-text abstract; CR/LF separates paragraphs.
        start_time: Start timestamp with UTC offset, if scheduled.
        end_time: End timestamp with UTC offset, if scheduled.
        track_id: Identifier of the session's track, if any.
        track: Track snapshot embedded in the payload, if any.
        speakers: Speakers in presentation order.
        conference_id: Owning conference, if reported.

    Raises:
        ValidationError: If both times are present and start is after end.
    """

    id: int = Field(..., description="Session identifier")
    title: str = Field(..., description="Session title")
    abstract: str | None = Field(None, description="Plain-text abstract")
    start_time: AwareDatetime | None = Field(None, description="Start time with offset")
    end_time: AwareDatetime | None = Field(None, description="End time with offset")
    track_id: int | None = Field(None, description="Track identifier")
    track: Track | None = Field(None, description="Embedded track snapshot")
    speakers: tuple[Speaker, ...] = Field(
        default=(), description="Speakers in presentation order"
    )
    conference_id: int | None = Field(None, description="Owning conference")

    @model_validator(mode="after")
    def check_time_order(self) -> "Session":
        """Ensure start_time <= end_time when both are known."""
        if (
            self.start_time is not None
            and self.end_time is not None
            and self.start_time > self.end_time
        ):
            raise ValueError("start_time must not be after end_time")
        return self

    @property
    def duration(self) -> timedelta | None:
        """Scheduled length, or None when either time is missing."""
        if self.start_time is None or self.end_time is None:
            return None
        return self.end_time - self.start_time


# =============================================================================
# Attendee
# =============================================================================


class Attendee(ConferenceModel):
    """Conference attendee. ``name`` is the unique lookup key."""

    name: str = Field(..., min_length=1, description="Unique attendee name")
    id: int | None = Field(None, description="Server-assigned identifier")
    first_name: str | None = Field(None, description="Given name")
    last_name: str | None = Field(None, description="Family name")
    email_address: str | None = Field(None, description="Contact e-mail")


# =============================================================================
# Search
# =============================================================================


class SearchTerm(ConferenceModel):
    """Body of POST /api/search."""

    query: str = Field(..., description="Free-text search query")


class SessionSearchResult(ConferenceModel):
    """Search hit on a session."""

    type: Literal["Session"] = "Session"
    session: Session


class SpeakerSearchResult(ConferenceModel):
    """Search hit on a speaker."""

    type: Literal["Speaker"] = "Speaker"
    speaker: Speaker


SearchResult = Annotated[
    SessionSearchResult | SpeakerSearchResult,
    Field(discriminator="type"),
]
"""Polymorphic search hit, discriminated by its ``type`` field."""
