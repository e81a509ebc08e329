"""Error codes (machine-readable).

Error codes follow the SUBJECT_REASON naming convention and travel with
every ``DomainError`` returned inside a ``Failure``.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes for conference API failures."""

    # Remote conference API
    API_TRANSPORT_FAILED = "api_transport_failed"
    API_DECODE_FAILED = "api_decode_failed"
    API_UNEXPECTED_STATUS = "api_unexpected_status"
