"""
Breed Fetcher Protocol

The single capability every sub-breed provider offers: given a breed name,
return its sub-breeds or raise BreedNotFoundError.

Implementations:
- DogApiBreedFetcher: remote dog.ceo API
- LocalBreedFetcher: deterministic in-memory data for tests and offline use
- CachingBreedFetcher: memoizing decorator around any of the above
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

# Ordered, immutable sequence of sub-breed names
SubBreeds = tuple[str, ...]


@runtime_checkable
class BreedFetcher(Protocol):
    """Protocol for sub-breed providers."""

    async def get_sub_breeds(self, breed: str) -> SubBreeds:
        """
        Fetch the sub-breeds of the given breed.

        Args:
            breed: Breed name (e.g. "hound")

        Returns:
            Sub-breed names in source order; empty if the breed has none

        Raises:
            BreedNotFoundError: If the breed does not exist or cannot be looked up
        """
        ...
