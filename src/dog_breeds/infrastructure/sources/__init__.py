"""
Breed Sources

Concrete BreedFetcher implementations:
- DogApiBreedFetcher: dog.ceo HTTP API
- LocalBreedFetcher: in-memory table
"""

from __future__ import annotations

from dog_breeds.infrastructure.sources.base_client import BaseAPIClient
from dog_breeds.infrastructure.sources.dog_ceo import DOG_CEO_API_BASE, DogApiBreedFetcher
from dog_breeds.infrastructure.sources.local import DEFAULT_BREEDS, LocalBreedFetcher

__all__ = [
    "BaseAPIClient",
    "DOG_CEO_API_BASE",
    "DogApiBreedFetcher",
    "DEFAULT_BREEDS",
    "LocalBreedFetcher",
]
