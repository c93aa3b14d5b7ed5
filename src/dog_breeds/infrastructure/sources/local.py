"""
Local Breed Fetcher

Deterministic in-memory BreedFetcher for tests and offline runs. No I/O.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from dog_breeds.core.exceptions import BreedNotFoundError
from dog_breeds.domain.fetcher import SubBreeds

logger = logging.getLogger(__name__)

# Snapshot of a few dog.ceo entries
DEFAULT_BREEDS: dict[str, SubBreeds] = {
    "hound": ("afghan", "basset", "blood", "english", "ibizan", "plott", "walker"),
    "bulldog": ("boston", "english", "french"),
    "retriever": ("chesapeake", "curly", "flatcoated", "golden"),
    "terrier": ("american", "australian", "bedlington", "border", "cairn", "dandie"),
    "pug": (),
    "beagle": (),
}


class LocalBreedFetcher:
    """
    BreedFetcher over a fixed breed → sub-breeds table.

    Breed names are matched case-insensitively, mirroring the remote API.
    """

    def __init__(self, breeds: Mapping[str, Iterable[str]] | None = None):
        source = DEFAULT_BREEDS if breeds is None else breeds
        self._breeds: dict[str, SubBreeds] = {
            name.lower().strip(): tuple(subs) for name, subs in source.items()
        }

    async def get_sub_breeds(self, breed: str) -> SubBreeds:
        if breed is None or not breed.strip():
            raise BreedNotFoundError(f"Invalid breed name: {breed!r}", breed=breed)

        try:
            return self._breeds[breed.lower().strip()]
        except KeyError:
            logger.debug(f"Local fetcher: no entry for {breed!r}")
            raise BreedNotFoundError(f"Breed not found: {breed}", breed=breed) from None

    @property
    def breeds(self) -> tuple[str, ...]:
        """Known breed names."""
        return tuple(self._breeds)
