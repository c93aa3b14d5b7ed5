"""
Dog Breeds - Sub-breed lookup with a caching fetcher

Looks up the sub-breeds of a dog breed from the dog.ceo API (or a local
table) and caches successful lookups so the API is asked only once per breed.

Usage:
    from dog_breeds import CachingBreedFetcher, DogApiBreedFetcher

    fetcher = CachingBreedFetcher(DogApiBreedFetcher())
    subs = await fetcher.get_sub_breeds("hound")
    print(fetcher.get_calls_made())

Features:
    - BreedFetcher protocol with remote and local implementations
    - Case-insensitive caching of successful lookups only
    - Delegate call accounting
"""

from .application import count_sub_breeds
from .core import BreedNotFoundError, ConfigurationError, DogBreedsError
from .domain import BreedFetcher, SubBreeds
from .infrastructure.cache import CacheStats, CachingBreedFetcher
from .infrastructure.sources import DogApiBreedFetcher, LocalBreedFetcher

__version__ = "0.1.0"

__all__ = [
    # Contract
    "BreedFetcher",
    "SubBreeds",
    # Fetchers
    "CachingBreedFetcher",
    "CacheStats",
    "DogApiBreedFetcher",
    "LocalBreedFetcher",
    # Use cases
    "count_sub_breeds",
    # Errors
    "DogBreedsError",
    "BreedNotFoundError",
    "ConfigurationError",
]
