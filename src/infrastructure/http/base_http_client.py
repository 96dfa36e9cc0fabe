"""Base HTTP client for outbound integrations.

This module provides a base class for integration clients that handles:
- HTTP request execution with timeout/connection error handling
- Response status code interpretation
- JSON parsing with error handling
- Structured logging with service context

Subclasses only need to:
1. Build authentication headers (Bearer token, API key, etc.)
2. Set the IntegrationError subclass and ErrorCode they raise
3. Call the base methods for HTTP operations

Architecture:
    - Infrastructure layer (adapter for external APIs)
    - Uses httpx for async HTTP
    - Raises IntegrationError subclasses; event handlers let them reach the
      event bus, and the webhook command handler maps them to Result failures
"""

from typing import Any, NoReturn

import httpx
import structlog

from src.core.constants import HTTP_TIMEOUT_DEFAULT, RESPONSE_BODY_MAX_LENGTH
from src.core.enums import ErrorCode
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import ExternalServiceError, IntegrationError


class BaseHTTPClient:
    """Base class for integration clients with shared HTTP handling.

    Attributes:
        _base_url: API base URL (without trailing slash).
        _service_name: Service identifier for logging and error messages.
        _timeout: HTTP request timeout in seconds.
        _transport: Optional httpx transport (tests pass httpx.MockTransport).
        _logger: Structured logger with service context.

    Example:
        >>> class SlackNotifier(BaseHTTPClient):
        ...     error_class = ChatDeliveryError
        ...     error_code = ErrorCode.CHAT_DELIVERY_FAILED
        ...
        ...     async def post_message(self, channel, blocks):
        ...         await self._request(
        ...             method="POST",
        ...             path="",
        ...             json_data={"channel": channel, "blocks": blocks},
        ...             operation="post_message",
        ...         )
    """

    error_class: type[IntegrationError] = IntegrationError
    error_code: ErrorCode = ErrorCode.DOCUMENT_STORE_UNAVAILABLE

    def __init__(
        self,
        *,
        base_url: str,
        service_name: str,
        timeout: float = HTTP_TIMEOUT_DEFAULT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize base HTTP client.

        Args:
            base_url: API base URL (e.g., "https://api.resend.com").
            service_name: Service identifier (e.g., "sanity", "resend").
            timeout: HTTP request timeout in seconds.
            transport: Optional httpx transport override.
        """
        self._base_url = base_url.rstrip("/")
        self._service_name = service_name
        self._timeout = timeout
        self._transport = transport
        self._logger = structlog.get_logger(f"{service_name}_api")

    def _default_headers(self) -> dict[str, str]:
        """Authentication headers added to every request."""
        return {}

    def _raise(
        self,
        message: str,
        *,
        infrastructure_code: InfrastructureErrorCode,
        **details: Any,
    ) -> NoReturn:
        raise self.error_class(
            ExternalServiceError(
                code=self.error_code,
                message=message,
                infrastructure_code=infrastructure_code,
                service_name=self._service_name,
                details=details or None,
            )
        )

    async def _request(
        self,
        *,
        method: str,
        path: str,
        operation: str,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
        json_data: Any = None,
        content: bytes | None = None,
    ) -> httpx.Response:
        """Execute HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, etc.).
            path: URL path relative to base_url.
            operation: Operation name for logging.
            headers: Extra HTTP headers.
            params: Optional query parameters.
            json_data: Optional JSON body.
            content: Optional raw body (asset uploads).

        Returns:
            httpx.Response with a 2xx status.

        Raises:
            IntegrationError: Timeout, connection failure or non-2xx status.
        """
        url = f"{self._base_url}{path}"
        request_headers = {**self._default_headers(), **(headers or {})}

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=request_headers,
                    params=params,
                    json=json_data,
                    content=content,
                )

        except httpx.TimeoutException as e:
            self._logger.warning(
                f"{self._service_name}_api_timeout",
                operation=operation,
                error=str(e),
            )
            self._raise(
                f"{self._service_name.title()} API request timed out",
                infrastructure_code=InfrastructureErrorCode.EXTERNAL_SERVICE_TIMEOUT,
                operation=operation,
            )

        except httpx.RequestError as e:
            self._logger.warning(
                f"{self._service_name}_api_connection_error",
                operation=operation,
                error=str(e),
            )
            self._raise(
                f"Failed to connect to {self._service_name.title()} API: {e}",
                infrastructure_code=InfrastructureErrorCode.EXTERNAL_SERVICE_UNAVAILABLE,
                operation=operation,
            )

        self._check_error_response(response, operation)
        return response

    def _check_error_response(self, response: httpx.Response, operation: str) -> None:
        """Raise for non-2xx responses.

        Args:
            response: HTTP response to check.
            operation: Operation name for logging.

        Raises:
            IntegrationError: On any non-2xx status.
        """
        status = response.status_code

        if 200 <= status < 300:
            return

        body = response.text[:RESPONSE_BODY_MAX_LENGTH]

        if status >= 500:
            self._logger.warning(
                f"{self._service_name}_api_server_error",
                operation=operation,
                status_code=status,
            )
            self._raise(
                f"{self._service_name.title()} API server error: {status}",
                infrastructure_code=InfrastructureErrorCode.EXTERNAL_SERVICE_UNAVAILABLE,
                operation=operation,
                status_code=status,
                response_body=body,
            )

        self._logger.warning(
            f"{self._service_name}_api_request_rejected",
            operation=operation,
            status_code=status,
        )
        self._raise(
            f"{self._service_name.title()} API rejected request: {status}",
            infrastructure_code=InfrastructureErrorCode.EXTERNAL_SERVICE_ERROR,
            operation=operation,
            status_code=status,
            response_body=body,
        )

    def _parse_json(self, response: httpx.Response, operation: str) -> Any:
        """Parse response body as JSON.

        Raises:
            IntegrationError: Body is not valid JSON.
        """
        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(
                f"{self._service_name}_api_invalid_json",
                operation=operation,
                error=str(e),
            )
            self._raise(
                f"Invalid JSON response from {self._service_name.title()}",
                infrastructure_code=InfrastructureErrorCode.EXTERNAL_SERVICE_INVALID_RESPONSE,
                operation=operation,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )

        self._logger.debug(
            f"{self._service_name}_api_succeeded",
            operation=operation,
        )
        return data

    async def _request_json(
        self,
        *,
        method: str,
        path: str,
        operation: str,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
        json_data: Any = None,
        content: bytes | None = None,
    ) -> Any:
        """Execute request and parse the JSON body."""
        response = await self._request(
            method=method,
            path=path,
            operation=operation,
            headers=headers,
            params=params,
            json_data=json_data,
            content=content,
        )
        return self._parse_json(response, operation)
