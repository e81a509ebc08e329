"""Base API client for conference back-end HTTP communication.

This module provides a base class for API clients that handles:
- HTTP request execution with timeout/connection error handling
- Response status interpretation, including per-operation 404 policies
- JSON encoding/decoding through JsonCodec
- Structured logging with service context

Subclasses only declare endpoints and pick the 404 policy for each.

Architecture:
    - Infrastructure layer (adapter for an external API)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for expected failures)
    - No retries: one failed attempt is returned to the caller as-is
"""

from enum import Enum
from http import HTTPStatus
from typing import Any

import httpx
import structlog

from src.core.constants import (
    API_TIMEOUT_DEFAULT,
    JSON_CONTENT_TYPE,
    RESPONSE_BODY_MAX_LENGTH,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import ApiClientError, TransportError, UnexpectedStatusError
from src.infrastructure.api.json_codec import JsonCodec


class NotFoundPolicy(Enum):
    """How an operation interprets HTTP 404."""

    ERROR = "error"
    """404 is an UnexpectedStatusError (collections, writes)."""

    ABSENT = "absent"
    """404 means the resource does not exist: Success(value=None)."""

    SUCCESS = "success"
    """404 means the goal state already holds (idempotent deletes)."""


class BaseApiClient:
    """Base class for API clients with shared HTTP handling.

    Concurrency: holds no per-call state. When ``http_client`` is given its
    connection pool is shared by all calls; otherwise each call opens and
    closes its own ``httpx.AsyncClient``.

    Attributes:
        _base_url: API base URL (without trailing slash).
        _service_name: Service identifier for logging and error messages.
        _timeout: HTTP transport timeout in seconds.
        _codec: JSON codec for request and response bodies.
        _http_client: Optional shared httpx client.
        _logger: Structured logger with service context.

    Example:
        >>> class SpeakersAPI(BaseApiClient):
        ...     async def get_speaker(self, speaker_id: int):
        ...         return await self._fetch_one(
        ...             path=f"/api/speakers/{speaker_id}",
        ...             type_=Speaker,
        ...             operation="get_speaker",
        ...         )
    """

    def __init__(
        self,
        *,
        base_url: str,
        service_name: str,
        timeout: float = API_TIMEOUT_DEFAULT,
        codec: JsonCodec | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize base API client.

        Args:
            base_url: API base URL (e.g., "https://conf.example.com").
            service_name: Service identifier (e.g., "conference").
            timeout: HTTP transport timeout in seconds.
            codec: JSON codec. Defaults to a new JsonCodec.
            http_client: Shared httpx client. Defaults to one client per call.
        """
        self._base_url = base_url.rstrip("/")
        self._service_name = service_name
        self._timeout = timeout
        self._codec = codec or JsonCodec()
        self._http_client = http_client
        self._logger = structlog.get_logger(f"{service_name}_api")

    async def _execute_request(
        self,
        *,
        method: str,
        path: str,
        operation: str,
        body: Any | None = None,
    ) -> Result[httpx.Response, TransportError]:
        """Execute HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, etc.).
            path: URL path relative to base_url.
            operation: Operation name for logging.
            body: Optional model to send as JSON.

        Returns:
            Success(httpx.Response): Raw HTTP response, any status.
            Failure(TransportError): On timeout or connection error.
        """
        url = f"{self._base_url}{path}"
        headers = {"Accept": JSON_CONTENT_TYPE}
        content: bytes | None = None
        if body is not None:
            content = self._codec.encode(body)
            headers["Content-Type"] = self._codec.content_type

        self._logger.debug(
            f"{self._service_name}_api_request",
            operation=operation,
            method=method,
            path=path,
        )

        try:
            if self._http_client is not None:
                response = await self._http_client.request(
                    method, url, headers=headers, content=content
                )
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.request(
                        method, url, headers=headers, content=content
                    )
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                f"{self._service_name}_api_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=TransportError(
                    code=ErrorCode.API_TRANSPORT_FAILED,
                    message=f"{self._service_name.title()} API request timed out",
                    operation=operation,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                f"{self._service_name}_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=TransportError(
                    code=ErrorCode.API_TRANSPORT_FAILED,
                    message=f"Failed to connect to {self._service_name.title()} API: {e}",
                    operation=operation,
                )
            )

    def _check_error_response(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Failure[UnexpectedStatusError] | None:
        """Check HTTP response for a non-2xx status.

        Args:
            response: HTTP response to check.
            operation: Operation name for logging.

        Returns:
            Failure(UnexpectedStatusError) if status is not 2xx, None if OK.
        """
        if response.is_success:
            return None

        status = response.status_code
        self._logger.warning(
            f"{self._service_name}_api_unexpected_status",
            operation=operation,
            status_code=status,
        )
        return Failure(
            error=UnexpectedStatusError(
                code=ErrorCode.API_UNEXPECTED_STATUS,
                message=f"Unexpected response from {self._service_name.title()} API: {status}",
                operation=operation,
                status_code=status,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )
        )

    def _is_tolerated_not_found(
        self,
        response: httpx.Response,
        operation: str,
        not_found: NotFoundPolicy,
    ) -> bool:
        """True when the response is a 404 the operation's policy accepts."""
        if response.status_code != HTTPStatus.NOT_FOUND:
            return False
        if not_found is NotFoundPolicy.ERROR:
            return False
        self._logger.debug(
            f"{self._service_name}_api_not_found",
            operation=operation,
            policy=not_found.value,
        )
        return True

    async def _fetch[T](
        self,
        *,
        method: str = "GET",
        path: str,
        type_: Any,
        operation: str,
        body: Any | None = None,
        not_found: NotFoundPolicy = NotFoundPolicy.ERROR,
    ) -> Result[T | None, ApiClientError]:
        """Execute request and decode the response body as ``type_``.

        Args:
            method: HTTP method.
            path: URL path relative to base_url.
            type_: Type to decode the body into.
            operation: Operation name for logging.
            body: Optional model to send as JSON.
            not_found: 404 policy; ABSENT yields Success(value=None).

        Returns:
            Success(T): Decoded body.
            Success(None): 404 under the ABSENT policy.
            Failure(ApiClientError): Transport, status or decode failure.
        """
        result = await self._execute_request(
            method=method, path=path, operation=operation, body=body
        )
        if isinstance(result, Failure):
            return result

        response = result.value
        if self._is_tolerated_not_found(response, operation, not_found):
            return Success(value=None)

        error_result = self._check_error_response(response, operation)
        if error_result is not None:
            return error_result

        decoded: Result[T, ApiClientError] = self._codec.decode(
            response.content, type_, operation=operation
        )
        if isinstance(decoded, Success):
            self._logger.debug(
                f"{self._service_name}_api_succeeded",
                operation=operation,
            )
        return decoded

    async def _send(
        self,
        *,
        method: str,
        path: str,
        operation: str,
        body: Any | None = None,
        not_found: NotFoundPolicy = NotFoundPolicy.ERROR,
    ) -> Result[None, ApiClientError]:
        """Execute request whose response body is ignored.

        Args:
            method: HTTP method.
            path: URL path relative to base_url.
            operation: Operation name for logging.
            body: Optional model to send as JSON.
            not_found: 404 policy; SUCCESS treats 404 as done.

        Returns:
            Success(None): Any 2xx, or 404 under a tolerant policy.
            Failure(ApiClientError): Transport or status failure.
        """
        result = await self._execute_request(
            method=method, path=path, operation=operation, body=body
        )
        if isinstance(result, Failure):
            return result

        response = result.value
        if self._is_tolerated_not_found(response, operation, not_found):
            return Success(value=None)

        error_result = self._check_error_response(response, operation)
        if error_result is not None:
            return error_result

        self._logger.debug(
            f"{self._service_name}_api_succeeded",
            operation=operation,
        )
        return Success(value=None)
