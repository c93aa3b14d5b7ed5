"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from dog_breeds.infrastructure.cache.breed_cache import CachingBreedFetcher
from dog_breeds.infrastructure.sources.local import LocalBreedFetcher

# ============================================================
# Breed Data Fixtures
# ============================================================


@pytest.fixture
def hound_breeds():
    """Breed table with a hound entry and no cat."""
    return {"hound": ["afghan hound", "basset hound"], "pug": []}


@pytest.fixture
def local_fetcher(hound_breeds):
    """Local fetcher over the small hound table."""
    return LocalBreedFetcher(hound_breeds)


# ============================================================
# Delegate / Cache Fixtures
# ============================================================


@pytest.fixture
def delegate(local_fetcher):
    """Mock BreedFetcher that forwards to the local fetcher and records awaits."""
    fetcher = MagicMock()
    fetcher.get_sub_breeds = AsyncMock(side_effect=local_fetcher.get_sub_breeds)
    return fetcher


@pytest.fixture
def caching_fetcher(delegate):
    """Fresh CachingBreedFetcher around the recording delegate."""
    return CachingBreedFetcher(delegate)


# ============================================================
# Mock dog.ceo Responses
# ============================================================


@pytest.fixture
def mock_success_response():
    """dog.ceo body for an existing breed."""
    return {
        "status": "success",
        "message": ["afghan", "basset", "blood", "english", "ibizan", "plott", "walker"],
    }


@pytest.fixture
def mock_error_response():
    """dog.ceo body for an unknown breed."""
    return {
        "status": "error",
        "message": "Breed not found (main breed does not exist)",
        "code": 404,
    }


@pytest.fixture
def recorded_requests():
    """Requests seen by a mock transport built with make_transport."""
    return []


@pytest.fixture
def make_transport(recorded_requests):
    """
    Build an httpx.MockTransport that replays the given responses in order.

    Each item is either an httpx.Response or an exception instance to raise.
    The last item is repeated once the list is exhausted.
    """

    def _make(*responses):
        queue = list(responses)

        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            item = queue.pop(0) if len(queue) > 1 else queue[0]
            if isinstance(item, Exception):
                raise item
            return item

        return httpx.MockTransport(handler)

    return _make
