"""
Tests for the sub-breed counting use case.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from dog_breeds.application.sub_breeds import count_sub_breeds
from dog_breeds.core.exceptions import BreedNotFoundError
from dog_breeds.infrastructure.cache.breed_cache import CachingBreedFetcher


class TestCountSubBreeds:
    """Tests for count_sub_breeds."""

    async def test_counts_sub_breeds(self, local_fetcher):
        assert await count_sub_breeds("hound", local_fetcher) == 2

    async def test_no_sub_breeds(self, local_fetcher):
        assert await count_sub_breeds("pug", local_fetcher) == 0

    async def test_not_found_counts_zero(self, local_fetcher):
        assert await count_sub_breeds("cat", local_fetcher) == 0

    async def test_through_cache(self, caching_fetcher):
        assert await count_sub_breeds("hound", caching_fetcher) == 2
        assert await count_sub_breeds("HOUND", caching_fetcher) == 2
        assert await count_sub_breeds("cat", caching_fetcher) == 0
        assert await count_sub_breeds("cat", caching_fetcher) == 0

        assert caching_fetcher.get_calls_made() == 3

    async def test_cache_still_raises(self, caching_fetcher):
        """Zero substitution is not done by the cache."""
        with pytest.raises(BreedNotFoundError):
            await caching_fetcher.get_sub_breeds("cat")

    async def test_other_errors_propagate(self):
        fetcher = MagicMock()
        fetcher.get_sub_breeds = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            await count_sub_breeds("hound", CachingBreedFetcher(fetcher))
