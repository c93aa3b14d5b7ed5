"""
Exception Hierarchy for Dog Breeds.

Exception Hierarchy:
    DogBreedsError (base)
    ├── APIError
    │   ├── RateLimitError
    │   ├── NetworkError
    │   └── ServiceUnavailableError
    ├── DataError
    │   ├── BreedNotFoundError
    │   └── ParseError
    └── ConfigurationError

Only BreedNotFoundError crosses the breed lookup boundary. The API and data
errors are raised by the HTTP layer, which retries the retryable ones, and
are converted by the remote fetcher.
"""

from __future__ import annotations


class DogBreedsError(Exception):
    """Base exception for all Dog Breeds errors."""

    def __init__(self, message: str, *, retryable: bool = False) -> None:
        super().__init__(message)
        self.retryable = retryable


# =============================================================================
# API Errors
# =============================================================================

class APIError(DogBreedsError):
    """Base class for API-related errors."""

    def __init__(self, message: str, *, retryable: bool = True) -> None:
        super().__init__(message, retryable=retryable)


class RateLimitError(APIError):
    """Raised when API rate limit is exceeded."""

    def __init__(
        self,
        message: str = "API rate limit exceeded",
        *,
        retry_after: float = 1.0,
    ) -> None:
        super().__init__(message, retryable=True)
        self.retry_after = retry_after


class NetworkError(APIError):
    """Raised for network connectivity issues."""

    def __init__(self, message: str = "Network connection failed") -> None:
        super().__init__(message, retryable=True)


class ServiceUnavailableError(APIError):
    """Raised when the remote service answers with an unusable status."""

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        *,
        service: str = "Dog CEO",
        status_code: int | None = None,
    ) -> None:
        # Server-side failures may clear up; client errors will not
        retryable = status_code is None or status_code >= 500
        super().__init__(f"{service}: {message}", retryable=retryable)
        self.status_code = status_code


# =============================================================================
# Data Errors
# =============================================================================

class DataError(DogBreedsError):
    """Base class for data-related errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message, retryable=False)


class BreedNotFoundError(DataError):
    """
    Raised when sub-breeds for a breed cannot be obtained.

    Covers a breed that does not exist as well as invalid input, malformed
    responses and transport failures. Callers treat all of them the same.
    """

    def __init__(self, reason: str, *, breed: str | None = None) -> None:
        super().__init__(reason)
        self.breed = breed


class ParseError(DataError):
    """Raised when a response body cannot be parsed."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        full_msg = f"Parse error: {message}"
        if source:
            full_msg = f"Parse error ({source}): {message}"
        super().__init__(full_msg)


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(DogBreedsError):
    """Raised for configuration-related errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message, retryable=False)


def is_retryable_error(error: Exception) -> bool:
    """Check if an error should be retried."""
    if isinstance(error, DogBreedsError):
        return error.retryable
    return False
