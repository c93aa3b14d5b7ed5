"""
Sub-breed counting use case.

A breed that cannot be found counts as having zero sub-breeds. That policy
belongs to this consumer only; fetchers and the cache always raise.
"""

from __future__ import annotations

import logging

from dog_breeds.core.exceptions import BreedNotFoundError
from dog_breeds.domain.fetcher import BreedFetcher

logger = logging.getLogger(__name__)


async def count_sub_breeds(breed: str, fetcher: BreedFetcher) -> int:
    """
    Return the number of sub-breeds the given breed has.

    Args:
        breed: Breed name
        fetcher: Any BreedFetcher (usually a CachingBreedFetcher)

    Returns:
        Number of sub-breeds; 0 if the breed has none or is not found
    """
    try:
        sub_breeds = await fetcher.get_sub_breeds(breed)
    except BreedNotFoundError as e:
        logger.info(f"{breed!r} not found, counting 0 sub-breeds: {e}")
        return 0
    return len(sub_breeds)
