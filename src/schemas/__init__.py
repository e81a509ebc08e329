"""Conference wire schemas.

Pydantic models for conference API payloads.

Usage:
    from src.schemas import Session, Speaker, SearchResult
"""

from src.schemas.conference_schemas import (
    Attendee,
    ConferenceModel,
    SearchResult,
    SearchTerm,
    Session,
    SessionSearchResult,
    Speaker,
    SpeakerSearchResult,
    Track,
)

__all__ = [
    "Attendee",
    "ConferenceModel",
    "SearchResult",
    "SearchTerm",
    "Session",
    "SessionSearchResult",
    "Speaker",
    "SpeakerSearchResult",
    "Track",
]
