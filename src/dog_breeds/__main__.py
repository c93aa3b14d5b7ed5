"""
Dog Breeds - command line entry point.

Prints how many sub-breeds each breed has, going through the caching
fetcher so repeated breeds are only looked up once.

Usage:
    python -m dog_breeds                      # hound, cat
    python -m dog_breeds hound bulldog HOUND
    python -m dog_breeds --provider local hound cat
    python -m dog_breeds --max-retries 0 hound

Environment Variables:
    DOG_BREEDS_PROVIDER, DOG_API_BASE_URL, DOG_API_TIMEOUT,
    DOG_API_MAX_RETRIES, DOG_BREEDS_LOG_LEVEL (see dog_breeds.container)
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from dog_breeds.application.sub_breeds import count_sub_breeds
from dog_breeds.container import PROVIDERS, ApplicationContainer, load_config
from dog_breeds.core.exceptions import ConfigurationError
from dog_breeds.infrastructure.sources.base_client import BaseAPIClient

logger = logging.getLogger("dog_breeds")

DEMO_BREEDS = ["hound", "cat"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dog_breeds",
        description="Count the sub-breeds of dog breeds",
    )
    parser.add_argument("breeds", nargs="*", default=DEMO_BREEDS, help="Breed names (default: hound cat)")
    parser.add_argument("--provider", choices=PROVIDERS, help="Breed source (default: remote)")
    parser.add_argument("--base-url", help="dog.ceo API base URL")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--max-retries", type=int, help="Retries on retryable API errors (default: 2)")
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    return parser


async def _run(container: ApplicationContainer, breeds: list[str]) -> None:
    fetcher = container.breed_fetcher()
    try:
        for breed in breeds:
            count = await count_sub_breeds(breed, fetcher)
            print(f"{breed} has {count} sub breeds")
        logger.info(f"Calls made to {container.config.source()} fetcher: {fetcher.get_calls_made()}")
    finally:
        source = fetcher.fetcher
        if isinstance(source, BaseAPIClient):
            await source.close()


def main(argv: list[str] | None = None) -> int:
    """Run the command line entry point."""
    args = _build_parser().parse_args(argv)

    try:
        config = load_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    # CLI arguments take precedence over environment
    if args.provider:
        config["source"] = args.provider
    if args.base_url:
        config["base_url"] = args.base_url
    if args.timeout is not None:
        config["timeout"] = args.timeout
    if args.max_retries is not None:
        if args.max_retries < 0:
            print("Configuration error: --max-retries must not be negative", file=sys.stderr)
            return 2
        config["max_retries"] = args.max_retries
    if args.log_level:
        config["log_level"] = args.log_level.upper()

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, config["log_level"], logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    container = ApplicationContainer()
    container.config.from_dict(config)

    asyncio.run(_run(container, args.breeds))
    return 0


if __name__ == "__main__":
    sys.exit(main())
