"""``errpage paths`` and ``errpage find`` — candidate listing and probing.

Both commands fill missing arguments from ``ErrorPageConfig.from_env()``.
"""

import argparse
import sys

from errpage.config import ErrorPageConfig
from errpage.pages import find_error_page
from errpage.paths import PathResolver


def _settings(args: argparse.Namespace) -> tuple[str, str, PathResolver]:
    config = ErrorPageConfig.from_env()
    location = args.location if args.location is not None else config.location
    language = args.lang if args.lang is not None else config.language
    if not location:
        print("error: no location given and ERRPAGE_LOCATION is not set", file=sys.stderr)
        sys.exit(2)
    return location, language, PathResolver(config=config.resolver)


def run_paths(args: argparse.Namespace) -> None:
    """Print every candidate for the location, one per line."""
    location, language, resolver = _settings(args)
    for candidate in resolver.resolve(location, language):
        print(candidate)


def run_find(args: argparse.Namespace) -> None:
    """Print the first existing candidate; exit 1 if there is none."""
    location, language, resolver = _settings(args)
    found = find_error_page(location, language, resolver=resolver)
    if found is None:
        print(f"error: no error page found for {location}", file=sys.stderr)
        sys.exit(1)
    print(found)
