"""
Breed Cache

Memoizing BreedFetcher decorator. Wraps any BreedFetcher and remembers
successful lookups for the lifetime of the instance.

Features:
- Case-insensitive keys ("Hound", "hound" and "HOUND" share one entry)
- Only successes are cached; failures are re-raised and retried next time
- Counts calls actually made to the wrapped fetcher
- Async-safe: one asyncio.Lock serializes all misses
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from dog_breeds.core.exceptions import BreedNotFoundError
from dog_breeds.domain.fetcher import BreedFetcher, SubBreeds

logger = logging.getLogger(__name__)


class CachingBreedFetcher:
    """
    Caching decorator for a BreedFetcher.

    Cache hits never reach the wrapped fetcher. On a miss the wrapped fetcher
    is called with the breed exactly as given, the call is counted, and a
    successful result is stored as an immutable tuple.

    Concurrent misses are serialized by a single lock; the key is checked
    again once the lock is held, so concurrent lookups of the same breed
    result in one delegate call.

    Example:
        fetcher = CachingBreedFetcher(DogApiBreedFetcher())

        await fetcher.get_sub_breeds("hound")   # delegate call
        await fetcher.get_sub_breeds("HOUND")   # cache hit
        fetcher.get_calls_made()                # 1
    """

    def __init__(self, fetcher: BreedFetcher):
        """
        Initialize cache.

        Args:
            fetcher: Underlying BreedFetcher to delegate misses to
        """
        self._fetcher = fetcher
        self._cache: dict[str, SubBreeds] = {}
        self._calls_made = 0
        self._lock = asyncio.Lock()
        self._stats = CacheStats()

    @property
    def fetcher(self) -> BreedFetcher:
        """Wrapped fetcher."""
        return self._fetcher

    @property
    def stats(self) -> CacheStats:
        """Get cache statistics."""
        return self._stats

    @property
    def calls_made(self) -> int:
        """Number of calls made to the wrapped fetcher."""
        return self._calls_made

    def get_calls_made(self) -> int:
        return self._calls_made

    @staticmethod
    def _normalize_key(breed: str) -> str:
        """Normalize cache key."""
        return breed.lower()

    async def get_sub_breeds(self, breed: str) -> SubBreeds:
        """
        Get sub-breeds from cache, or fetch and cache them.

        Args:
            breed: Breed name, any casing

        Returns:
            Cached or freshly fetched sub-breeds

        Raises:
            BreedNotFoundError: Propagated unchanged from the wrapped fetcher
        """
        key = self._normalize_key(breed)

        # Hits don't need the lock
        cached = self._cache.get(key)
        if cached is not None:
            self._stats.hits += 1
            logger.debug(f"Cache hit: {key}")
            return cached

        async with self._lock:
            # Another task may have filled the entry while we waited
            cached = self._cache.get(key)
            if cached is not None:
                self._stats.hits += 1
                logger.debug(f"Cache hit after wait: {key}")
                return cached

            self._calls_made += 1
            self._stats.misses += 1
            logger.debug(f"Cache miss: {key} (delegate call #{self._calls_made})")

            try:
                result = await self._fetcher.get_sub_breeds(breed)
            except BreedNotFoundError as e:
                logger.warning(f"Lookup failed for {breed!r}, not caching: {e}")
                raise

            stored = tuple(result)
            self._cache[key] = stored
            logger.info(f"Cached {len(stored)} sub-breeds for {key!r}")
            return stored

    def __len__(self) -> int:
        """Get number of cached breeds."""
        return len(self._cache)

    def __contains__(self, breed: str) -> bool:
        """Check if a breed is cached (case-insensitive)."""
        return self._normalize_key(breed) in self._cache


@dataclass
class CacheStats:
    """Cache statistics."""

    hits: int = 0
    misses: int = 0

    @property
    def total_requests(self) -> int:
        """Total cache requests."""
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Cache hit rate (0-1)."""
        total = self.total_requests
        return self.hits / total if total > 0 else 0.0
