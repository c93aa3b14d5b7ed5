"""
Core module for Dog Breeds.

Provides the unified exception hierarchy.
"""

from .exceptions import (
    # API errors
    APIError,
    # Data errors
    BreedNotFoundError,
    # Configuration errors
    ConfigurationError,
    DataError,
    # Base
    DogBreedsError,
    NetworkError,
    ParseError,
    RateLimitError,
    ServiceUnavailableError,
    # Utilities
    is_retryable_error,
)

__all__ = [
    "DogBreedsError",
    "APIError",
    "RateLimitError",
    "NetworkError",
    "ServiceUnavailableError",
    "DataError",
    "BreedNotFoundError",
    "ParseError",
    "ConfigurationError",
    "is_retryable_error",
]
