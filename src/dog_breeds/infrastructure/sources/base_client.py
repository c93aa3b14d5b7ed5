"""
Base API Client - Common HTTP request pattern with retry on retryable errors.

Provides a reusable base class with:
- httpx.AsyncClient management
- Automatic retry on 429 (rate limit) with a bounded Retry-After
- Retry on 5xx and transport errors with exponential backoff
- Typed errors instead of raw httpx exceptions
"""

from __future__ import annotations

import asyncio
import logging
import math
from typing import Any

import httpx
from typing_extensions import Self

from dog_breeds.core.exceptions import (
    DogBreedsError,
    NetworkError,
    ParseError,
    RateLimitError,
    ServiceUnavailableError,
    is_retryable_error,
)

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "dog-breeds/0.1"

# Upper bound on a server-supplied Retry-After, in seconds
MAX_RETRY_AFTER = 60.0


class BaseAPIClient:
    """
    Base class for external API clients.

    Subclasses should set `_service_name` and can override:
    - `_handle_expected_status()`: Handle service-specific status codes (e.g., 404)
    - `_parse_response()`: Custom response processing

    Example:
        class MyClient(BaseAPIClient):
            _service_name = "MyAPI"

            def __init__(self):
                super().__init__(base_url="https://api.example.com")

            async def get_item(self, item_id: str) -> dict:
                return await self._make_request(f"/items/{item_id}")

    Raises (from `_make_request`):
        NetworkError: Transport failure after all retries
        RateLimitError: Still rate limited after all retries
        ServiceUnavailableError: Any other non-success status (5xx retried, 4xx not)
        ParseError: Empty or non-JSON body
    """

    _service_name: str = "API"

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_base_delay: float = 1.0,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize base client.

        Args:
            base_url: Base URL for the API (optional, can pass full URLs)
            timeout: Request timeout in seconds
            max_retries: Retries after the first attempt on retryable errors
            retry_base_delay: Base delay in seconds for exponential backoff
            headers: Default headers for all requests
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._max_retries = max_retries
        self._retry_base_delay = retry_base_delay
        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            headers={"User-Agent": DEFAULT_USER_AGENT, **(headers or {})},
            limits=httpx.Limits(
                max_connections=20,
                max_keepalive_connections=10,
                keepalive_expiry=30.0,
            ),
            transport=transport,
        )

    def _build_url(self, url: str) -> str:
        """Build full URL from path or full URL."""
        if url.startswith(("http://", "https://")):
            return url
        return f"{self._base_url}{url}"

    def _backoff_delay(self, attempt: int) -> float:
        return self._retry_base_delay * (2**attempt)

    async def _make_request(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Make a GET request, retrying errors that are marked retryable.

        Args:
            url: Full URL or path (appended to base_url)
            headers: Additional headers for this request

        Returns:
            Parsed JSON body
        """
        full_url = self._build_url(url)

        for attempt in range(self._max_retries + 1):
            try:
                return await self._attempt_request(full_url, attempt, headers=headers)
            except DogBreedsError as e:
                if attempt < self._max_retries and is_retryable_error(e):
                    delay = e.retry_after if isinstance(e, RateLimitError) else self._backoff_delay(attempt)
                    logger.warning(
                        f"{self._service_name}: {e} (attempt {attempt + 1}/{self._max_retries + 1}), "
                        f"retrying in {delay:.1f}s"
                    )
                    await asyncio.sleep(delay)
                    continue
                logger.error(f"{self._service_name} request failed: {e}")
                raise

        # Only reachable with a negative max_retries
        raise NetworkError(f"{self._service_name}: no request attempted")

    async def _attempt_request(
        self,
        url: str,
        attempt: int,
        *,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make a single request, mapping failures onto the exception hierarchy."""
        try:
            response = await self._execute_request(url, headers=headers)
        except httpx.RequestError as e:
            raise NetworkError(f"{self._service_name} request failed: {e}") from e

        # Handle expected error codes (e.g., 404 with a JSON error body)
        expected = self._handle_expected_status(response, url)
        if expected is not _CONTINUE:
            return expected

        if response.status_code == 429:
            raise RateLimitError(retry_after=self._get_retry_after(response, attempt))

        if response.is_error:
            raise ServiceUnavailableError(
                f"HTTP {response.status_code} {response.reason_phrase}",
                service=self._service_name,
                status_code=response.status_code,
            )

        return self._parse_response(response)

    async def _execute_request(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Execute the actual HTTP request. Override for custom behavior."""
        return await self._client.get(url, headers=headers or {})

    def _handle_expected_status(self, response: httpx.Response, url: str) -> Any:
        """
        Handle expected non-200 status codes that shouldn't trigger retry.

        Override in subclasses for service-specific behavior.
        Return a value to short-circuit.
        Return the sentinel _CONTINUE to continue normal processing.

        Default: no special handling.
        """
        return _CONTINUE

    def _parse_response(self, response: httpx.Response) -> Any:
        """Parse JSON response body."""
        if not response.content:
            raise ParseError("Empty response body", source=self._service_name)
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"Invalid JSON: {e}", source=self._service_name) from e

    def _get_retry_after(self, response: httpx.Response, attempt: int) -> float:
        """Extract Retry-After from response headers, with exponential backoff fallback."""
        header = response.headers.get("Retry-After")
        if header is None:
            return self._backoff_delay(attempt)
        try:
            value = float(header)
        except ValueError:
            return self._backoff_delay(attempt)
        if not math.isfinite(value) or value < 0:
            return self._backoff_delay(attempt)
        return min(value, MAX_RETRY_AFTER)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()


# Sentinel object to indicate "continue normal processing" from _handle_expected_status
_CONTINUE = object()
