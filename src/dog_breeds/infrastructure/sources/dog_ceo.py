"""
Dog CEO API Integration

Looks up sub-breeds through the public dog.ceo breed API.

API Documentation: https://dog.ceo/dog-api/documentation/

Responses:
    success → {"status": "success", "message": ["afghan", "basset", ...]}
    error   → {"status": "error", "message": "Breed not found (main breed does not exist)", "code": 404}

Every failure (unknown breed, malformed body, transport error) is reported
as BreedNotFoundError so callers only handle a single error kind.
"""

from __future__ import annotations

import logging
import urllib.parse
from typing import TYPE_CHECKING, Any

from dog_breeds.core.exceptions import APIError, BreedNotFoundError, ParseError
from dog_breeds.domain.fetcher import SubBreeds
from dog_breeds.infrastructure.sources.base_client import _CONTINUE, BaseAPIClient

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)

# Dog CEO API endpoint
DOG_CEO_API_BASE = "https://dog.ceo/api"


class DogApiBreedFetcher(BaseAPIClient):
    """
    BreedFetcher backed by the dog.ceo API.

    Usage:
        async with DogApiBreedFetcher() as fetcher:
            subs = await fetcher.get_sub_breeds("hound")
            # ("afghan", "basset", "blood", "english", "ibizan", "plott", "walker")

    Note:
        One request is made per call; there is no caching here. Wrap the
        fetcher in CachingBreedFetcher to avoid repeated requests.
    """

    _service_name = "Dog CEO"

    def __init__(
        self,
        base_url: str = DOG_CEO_API_BASE,
        timeout: float = 30.0,
        max_retries: int = 2,
        retry_base_delay: float = 1.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize Dog CEO client.

        Args:
            base_url: API base URL
            timeout: Request timeout in seconds
            max_retries: Retries on 429, 5xx or transport errors
            retry_base_delay: Base delay in seconds for exponential backoff
            transport: Optional httpx transport (for tests)
        """
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            retry_base_delay=retry_base_delay,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    def _handle_expected_status(self, response: httpx.Response, url: str) -> Any:
        """Handle 404 (unknown breed), which still carries a JSON error body."""
        if response.status_code == 404:
            logger.debug(f"Dog CEO: 404 for {url}")
            return self._parse_response(response)
        return _CONTINUE

    async def get_sub_breeds(self, breed: str) -> SubBreeds:
        """
        Fetch the sub-breeds of a breed from dog.ceo.

        Args:
            breed: Breed name, any casing (e.g. "Hound")

        Returns:
            Tuple of sub-breed names (empty if the breed has none)

        Raises:
            BreedNotFoundError: If the breed does not exist, the response is
                malformed, or the request fails for any reason
        """
        if breed is None or not breed.strip():
            raise BreedNotFoundError(f"Invalid breed name: {breed!r}", breed=breed)

        name = breed.lower().strip()
        url = f"/breed/{urllib.parse.quote(name, safe='')}/list"

        try:
            payload = await self._make_request(url)
        except (APIError, ParseError) as e:
            raise BreedNotFoundError(f"Network or API error: {e}", breed=breed) from e

        return self._extract_sub_breeds(payload, breed)

    @staticmethod
    def _extract_sub_breeds(payload: Any, breed: str) -> SubBreeds:
        """Validate a dog.ceo response body and pull out the sub-breed names."""
        if not isinstance(payload, dict):
            raise BreedNotFoundError(f"Unexpected API response: {type(payload).__name__}", breed=breed)

        status = payload.get("status", "")
        if status == "error":
            raise BreedNotFoundError(str(payload.get("message") or "Breed not found"), breed=breed)
        if status != "success":
            raise BreedNotFoundError(f"Unexpected API status: {status}", breed=breed)

        message = payload.get("message")
        if not isinstance(message, list) or not all(isinstance(item, str) for item in message):
            raise BreedNotFoundError("Unexpected API response: 'message' is not a list of names", breed=breed)

        return tuple(message)
