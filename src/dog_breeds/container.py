"""
Application DI Container (dependency-injector).

Centralizes fetcher creation and wiring.

Usage::

    from dog_breeds.container import ApplicationContainer, load_config

    container = ApplicationContainer()
    container.config.from_dict(load_config())

    fetcher = container.breed_fetcher()   # CachingBreedFetcher
    await fetcher.get_sub_breeds("hound")

    # In tests, override any provider:
    container.source_fetcher.override(providers.Object(mock_fetcher))
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from dependency_injector import containers, providers

from dog_breeds.core.exceptions import ConfigurationError
from dog_breeds.infrastructure.cache.breed_cache import CachingBreedFetcher
from dog_breeds.infrastructure.sources.local import LocalBreedFetcher

logger = logging.getLogger(__name__)

# Default configuration
DEFAULT_PROVIDER = "remote"
DEFAULT_BASE_URL = "https://dog.ceo/api"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 2
DEFAULT_LOG_LEVEL = "INFO"

PROVIDERS = ("remote", "local")


def load_config(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """
    Build container configuration from environment variables.

    Variables:
        DOG_BREEDS_PROVIDER: "remote" (dog.ceo) or "local" (in-memory table)
        DOG_API_BASE_URL: Base URL of the dog.ceo API
        DOG_API_TIMEOUT: Request timeout in seconds
        DOG_API_MAX_RETRIES: Retries on 429, 5xx and transport errors
        DOG_BREEDS_LOG_LEVEL: Log level for the command line entry point

    Raises:
        ConfigurationError: On an unknown provider, non-numeric or negative values
    """
    env = os.environ if environ is None else environ

    provider = env.get("DOG_BREEDS_PROVIDER", "").strip().lower() or DEFAULT_PROVIDER
    if provider not in PROVIDERS:
        raise ConfigurationError(f"DOG_BREEDS_PROVIDER must be one of {', '.join(PROVIDERS)}, got {provider!r}")

    try:
        timeout = float(env.get("DOG_API_TIMEOUT", "").strip() or DEFAULT_TIMEOUT)
    except ValueError as e:
        raise ConfigurationError(f"DOG_API_TIMEOUT must be a number: {e}") from e

    try:
        max_retries = int(env.get("DOG_API_MAX_RETRIES", "").strip() or DEFAULT_MAX_RETRIES)
    except ValueError as e:
        raise ConfigurationError(f"DOG_API_MAX_RETRIES must be an integer: {e}") from e
    if max_retries < 0:
        raise ConfigurationError(f"DOG_API_MAX_RETRIES must not be negative, got {max_retries}")

    return {
        "source": provider,
        "base_url": env.get("DOG_API_BASE_URL", "").strip() or DEFAULT_BASE_URL,
        "timeout": timeout,
        "max_retries": max_retries,
        "log_level": env.get("DOG_BREEDS_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL,
    }


def _create_remote_fetcher(base_url: str, timeout: float, max_retries: int) -> object:
    """Lazy factory for DogApiBreedFetcher (avoids top-level httpx import)."""
    from dog_breeds.infrastructure.sources.dog_ceo import DogApiBreedFetcher

    logger.debug(f"Creating dog.ceo fetcher for {base_url}")
    return DogApiBreedFetcher(base_url=base_url, timeout=timeout, max_retries=max_retries)


class ApplicationContainer(containers.DeclarativeContainer):
    """Central DI container for Dog Breeds.

    Manages:
    - ``source_fetcher``: the uncached fetcher chosen by ``config.source``
    - ``breed_fetcher``: CachingBreedFetcher wrapping ``source_fetcher``
    """

    config = providers.Configuration()

    source_fetcher = providers.Selector(
        config.source,
        remote=providers.Singleton(
            _create_remote_fetcher,
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=config.max_retries,
        ),
        local=providers.Singleton(LocalBreedFetcher),
    )

    breed_fetcher = providers.Singleton(
        CachingBreedFetcher,
        fetcher=source_fetcher,
    )


__all__ = ["ApplicationContainer", "load_config"]
