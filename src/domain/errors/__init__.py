"""Domain errors package.

Usage:
    from src.domain.errors import ApiClientError, TransportError
"""

from src.domain.errors.api_client_error import (
    ApiClientError,
    DecodeError,
    TransportError,
    UnexpectedStatusError,
)

__all__ = [
    "ApiClientError",
    "DecodeError",
    "TransportError",
    "UnexpectedStatusError",
]
