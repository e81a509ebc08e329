"""JSON codec for conference API bodies.

Encodes pydantic models (or containers of them) to UTF-8 JSON bytes using
the camelCase wire names, and decodes response bytes back into typed values.

Decoding never raises: an empty body, malformed JSON, or a payload that does
not validate against the requested type comes back as ``Failure(DecodeError)``.

Usage:
    codec = JsonCodec()
    body = codec.encode(SearchTerm(query="python"))
    result = codec.decode(response.content, list[Session], operation="list_sessions")
"""

from typing import Any

import structlog
from pydantic import TypeAdapter, ValidationError

from src.core.constants import JSON_CONTENT_TYPE, RESPONSE_BODY_MAX_LENGTH
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import DecodeError

logger = structlog.get_logger(__name__)


class JsonCodec:
    """Stateless JSON encoder/decoder backed by pydantic TypeAdapter.

    Thread-safe: No mutable state, can be shared across requests.

    Attributes:
        content_type: Media type of encoded bodies.
    """

    content_type: str = JSON_CONTENT_TYPE

    def encode(self, value: Any) -> bytes:
        """Serialize a value to UTF-8 JSON bytes.

        Args:
            value: Pydantic model, or list/tuple of models.

        Returns:
            JSON bytes with camelCase field names.
        """
        return TypeAdapter(type(value)).dump_json(value, by_alias=True)

    def decode[T](
        self,
        data: bytes,
        type_: Any,
        *,
        operation: str = "decode",
    ) -> Result[T, DecodeError]:
        """Parse JSON bytes into ``type_``.

        Args:
            data: Raw response body.
            type_: Target type (model class, ``list[Model]``, union alias).
            operation: Client operation name for error context.

        Returns:
            Success(T): Validated value.
            Failure(DecodeError): Empty, malformed, or invalid payload.
        """
        if not data or not data.strip():
            logger.warning("conference_api_empty_body", operation=operation)
            return Failure(
                error=DecodeError(
                    code=ErrorCode.API_DECODE_FAILED,
                    message="Empty response body",
                    operation=operation,
                    response_body="",
                )
            )

        try:
            value: T = TypeAdapter(type_).validate_json(data)
        except ValidationError as e:
            logger.warning(
                "conference_api_invalid_json",
                operation=operation,
                error_count=e.error_count(),
            )
            return Failure(
                error=DecodeError(
                    code=ErrorCode.API_DECODE_FAILED,
                    message=f"Invalid JSON response: {e.errors()[0]['msg']}",
                    operation=operation,
                    response_body=data[:RESPONSE_BODY_MAX_LENGTH].decode(
                        "utf-8", errors="replace"
                    ),
                )
            )

        return Success(value=value)
