#!/usr/bin/env python3
"""
CLI for ESV Fetch - Prints a Bible passage from the ESV API.

Usage:
    esv-fetch "John 3:16"             # Print a single verse
    esv-fetch "Psalm 23"              # Print a whole chapter
    esv-fetch -v "Romans 8:28-30"     # Log request progress to stderr

Requires ESV_API_KEY to be set (see https://api.esv.org/).
"""

import argparse
import logging
import sys
from typing import Optional

from pydantic import ValidationError

from .client import ConfigurationError, ESVError, fetch_passage
from .config import API_KEY_ENV, API_KEY_URL, Settings
from .models import MINIMAL_OPTIONS, PassageResponse


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

PROG = "esv-fetch"
DIVIDER = "-" * 40
TRANSLATION = "ESV"

# Formatting options sent with every request. Swap in PLAIN_TEXT_OPTIONS or a
# custom PassageOptions to change how the API lays out the text.
PASSAGE_OPTIONS = MINIMAL_OPTIONS


# =============================================================================
# Output
# =============================================================================

def render_passage(passage: PassageResponse) -> str:
    """Format a passage as the block printed on success."""
    return "\n".join([
        DIVIDER,
        f"{passage.canonical} ({TRANSLATION})",
        "",
        passage.text,
        DIVIDER,
    ])


def print_usage():
    print(f'Usage: {PROG} "<bible reference>"')
    print(f'Example: {PROG} "John 3:16-17"')


def configure_logging(verbosity: int):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def load_settings() -> Settings:
    """Read settings from the environment and require an API key."""
    try:
        settings = Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    if not settings.api_key:
        raise ConfigurationError(
            f"{API_KEY_ENV} environment variable not set.\n"
            f"Please get a key from {API_KEY_URL} and set the variable."
        )
    return settings


# =============================================================================
# CLI Entry Point
# =============================================================================

def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Fetch a Bible passage from the ESV API and print it.",
    )
    parser.add_argument(
        "reference",
        nargs="?",
        help="Passage reference (e.g., 'John 3:16-17')"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Log progress to stderr (repeat for debug output)"
    )

    # Only the first positional is the reference; anything after it is ignored.
    args, extra = parser.parse_known_args(argv)

    if not args.reference:
        print_usage()
        return 1

    configure_logging(args.verbose)
    if extra:
        logger.warning("Ignoring extra arguments: %s", " ".join(extra))

    try:
        settings = load_settings()
        logger.info("Fetching: %s", args.reference)
        passage = fetch_passage(
            args.reference,
            settings.api_key,
            options=PASSAGE_OPTIONS,
            base_url=settings.api_url,
            timeout=settings.timeout,
        )
    except ESVError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render_passage(passage))
    return 0


if __name__ == "__main__":
    exit(main())
