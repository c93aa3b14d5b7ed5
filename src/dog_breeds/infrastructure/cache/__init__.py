"""
Cache Infrastructure

Provides the caching decorator for breed lookups.
"""

from __future__ import annotations

from dog_breeds.infrastructure.cache.breed_cache import (
    CacheStats,
    CachingBreedFetcher,
)

__all__ = [
    "CacheStats",
    "CachingBreedFetcher",
]
