"""Conference API client error types.

These errors are part of the ConferenceApiProtocol contract. They describe
the failure cases a client call can return; "not found" on a single-resource
lookup is NOT one of them (it is ``Success(value=None)``).

Architecture:
- Domain layer errors (part of protocol contract)
- Inherit from DomainError (core layer)
- Returned in Result types, never raised

Hierarchy:
    ApiClientError
    ├── TransportError          connection, DNS or timeout failure
    │   └── DecodeError         response body is not valid JSON for the type
    └── UnexpectedStatusError   non-2xx status not covered by a 404 policy

Usage:
    from src.domain.errors import TransportError, UnexpectedStatusError

    match result:
        case Failure(error=UnexpectedStatusError(status_code=status)):
            ...
        case Failure(error=TransportError()):
            ...
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ApiClientError(DomainError):
    """Base conference API error.

    Attributes:
        code: ErrorCode.
        message: Human-readable message.
        operation: Client operation that failed (e.g., "list_sessions").
        details: Additional context.
    """

    operation: str


@dataclass(frozen=True, slots=True, kw_only=True)
class TransportError(ApiClientError):
    """The request never produced a usable response.

    Returned when:
    - Connection is refused or reset
    - DNS resolution fails
    - The transport timeout elapses

    Recovery: left to the caller; the client does not retry.
    """


@dataclass(frozen=True, slots=True, kw_only=True)
class DecodeError(TransportError):
    """Response body could not be decoded into the expected type.

    Returned when the body is empty, is not JSON, or does not match the
    expected model. Classed as a transport failure.

    Attributes:
        response_body: Truncated raw body for debugging.
    """

    response_body: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class UnexpectedStatusError(ApiClientError):
    """The service answered with a status the operation does not accept.

    Attributes:
        status_code: HTTP status code returned by the service.
        response_body: Truncated raw body for debugging.
    """

    status_code: int
    response_body: str | None = None
