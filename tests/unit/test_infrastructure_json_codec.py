"""Unit tests for JsonCodec.

Tests cover:
- Encoding models with camelCase wire names
- Decoding into models, lists and the search-result union
- Empty, malformed and schema-violating bodies
"""

from datetime import datetime

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.errors import DecodeError, TransportError
from src.infrastructure.api.json_codec import JsonCodec
from src.schemas.conference_schemas import (
    Attendee,
    SearchResult,
    SearchTerm,
    Session,
    SessionSearchResult,
    Speaker,
    SpeakerSearchResult,
)
from tests.conftest import at, make_session


@pytest.fixture
def codec() -> JsonCodec:
    return JsonCodec()


@pytest.mark.unit
class TestEncode:
    """Test request body encoding."""

    def test_content_type_is_json(self, codec: JsonCodec):
        assert codec.content_type == "application/json"

    def test_search_term(self, codec: JsonCodec):
        """SearchTerm encodes to a single query property."""
        assert codec.encode(SearchTerm(query="python")) == b'{"query":"python"}'

    def test_uses_camel_case_names(self, codec: JsonCodec):
        """Field names go out in their wire form."""
        body = codec.encode(
            Attendee(name="ada", first_name="Ada", email_address="ada@example.com")
        )

        assert b'"firstName":"Ada"' in body
        assert b'"emailAddress":"ada@example.com"' in body
        assert b"first_name" not in body

    def test_session_timestamps_keep_offset(self, codec: JsonCodec):
        """Timestamps are written with their UTC offset."""
        body = codec.encode(make_session(1, start=at(3, 9), track_id=1))

        assert b'"startTime":"2024-06-03T09:00:00-05:00"' in body
        assert b'"trackId":1' in body

    def test_non_ascii_is_utf8(self, codec: JsonCodec):
        """Output bytes are UTF-8."""
        body = codec.encode(SearchTerm(query="café"))

        assert body.decode("utf-8") == '{"query":"café"}'


@pytest.mark.unit
class TestDecode:
    """Test response body decoding."""

    def test_decodes_model(self, codec: JsonCodec):
        """camelCase payload decodes into a model."""
        result = codec.decode(
            b'{"id": 7, "name": "Ada Lovelace", "webSite": "https://ada.dev"}',
            Speaker,
        )

        assert isinstance(result, Success)
        assert result.value == Speaker(id=7, name="Ada Lovelace", web_site="https://ada.dev")

    def test_decodes_list(self, codec: JsonCodec):
        """JSON array decodes into a list of models."""
        result = codec.decode(
            b'[{"id": 1, "title": "A"}, {"id": 2, "title": "B"}]', list[Session]
        )

        assert isinstance(result, Success)
        assert [s.id for s in result.value] == [1, 2]

    def test_empty_array_is_empty_list(self, codec: JsonCodec):
        result = codec.decode(b"[]", list[Session])

        assert result == Success(value=[])

    def test_timestamps_are_offset_aware(self, codec: JsonCodec):
        """Decoded times keep the offset they were sent with."""
        result = codec.decode(
            b'{"id": 1, "title": "A", "startTime": "2024-06-03T23:30:00-05:00",'
            b' "endTime": "2024-06-04T00:30:00-05:00"}',
            Session,
        )

        assert isinstance(result, Success)
        start: datetime = result.value.start_time
        assert start.utcoffset() is not None
        assert start.date().isoformat() == "2024-06-03"

    def test_unknown_fields_ignored(self, codec: JsonCodec):
        """Extra properties from the server do not fail decoding."""
        result = codec.decode(b'{"id": 1, "name": "Web", "color": "blue"}', Speaker)

        assert isinstance(result, Success)

    def test_search_results_discriminated_by_type(self, codec: JsonCodec):
        """Each hit decodes to the variant its type names."""
        result = codec.decode(
            b'[{"type": "Session", "session": {"id": 1, "title": "Intro"}},'
            b' {"type": "Speaker", "speaker": {"id": 2, "name": "Grace"}}]',
            list[SearchResult],
        )

        assert isinstance(result, Success)
        session_hit, speaker_hit = result.value
        assert isinstance(session_hit, SessionSearchResult)
        assert session_hit.session.title == "Intro"
        assert isinstance(speaker_hit, SpeakerSearchResult)
        assert speaker_hit.speaker.name == "Grace"


@pytest.mark.unit
class TestDecodeFailures:
    """Test decode failures come back as DecodeError."""

    @pytest.mark.parametrize("body", [b"", b"   ", b"\r\n"])
    def test_empty_body(self, codec: JsonCodec, body: bytes):
        """Empty or whitespace-only body is a DecodeError."""
        result = codec.decode(body, list[Session], operation="list_sessions")

        assert isinstance(result, Failure)
        assert isinstance(result.error, DecodeError)
        assert result.error.code == ErrorCode.API_DECODE_FAILED
        assert result.error.message == "Empty response body"
        assert result.error.operation == "list_sessions"

    def test_malformed_json(self, codec: JsonCodec):
        """Syntactically broken JSON is a DecodeError with a body excerpt."""
        result = codec.decode(b"<html>oops</html>", Session, operation="get_session")

        assert isinstance(result, Failure)
        assert isinstance(result.error, DecodeError)
        assert result.error.message.startswith("Invalid JSON response")
        assert result.error.response_body == "<html>oops</html>"

    def test_wrong_shape(self, codec: JsonCodec):
        """Valid JSON that does not match the type is a DecodeError."""
        result = codec.decode(b'{"id": 1, "title": "A"}', list[Session])

        assert isinstance(result, Failure)
        assert isinstance(result.error, DecodeError)

    def test_missing_required_field(self, codec: JsonCodec):
        result = codec.decode(b'{"id": 1}', Session)

        assert isinstance(result, Failure)
        assert isinstance(result.error, DecodeError)

    def test_start_after_end_rejected(self, codec: JsonCodec):
        """Time-order violation surfaces as a DecodeError."""
        result = codec.decode(
            b'{"id": 1, "title": "A", "startTime": "2024-06-03T10:00:00Z",'
            b' "endTime": "2024-06-03T09:00:00Z"}',
            Session,
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, DecodeError)

    def test_naive_timestamp_rejected(self, codec: JsonCodec):
        """Timestamps must carry an offset."""
        result = codec.decode(
            b'{"id": 1, "title": "A", "startTime": "2024-06-03T10:00:00"}', Session
        )

        assert isinstance(result, Failure)

    def test_decode_error_is_transport_error(self, codec: JsonCodec):
        """Callers matching TransportError also catch decode failures."""
        result = codec.decode(b"nope", Session)

        assert isinstance(result, Failure)
        assert isinstance(result.error, TransportError)

    def test_body_excerpt_truncated(self, codec: JsonCodec):
        """Excerpt is capped at 500 characters."""
        result = codec.decode(b"x" * 5000, Session)

        assert isinstance(result, Failure)
        assert len(result.error.response_body) == 500
