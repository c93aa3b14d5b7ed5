"""
Domain Layer

Contains:
- fetcher: BreedFetcher protocol and the SubBreeds type
"""

from .fetcher import BreedFetcher, SubBreeds

__all__ = [
    "BreedFetcher",
    "SubBreeds",
]
