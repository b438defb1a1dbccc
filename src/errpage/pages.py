"""Error page lookup.

Probes the candidates produced by ``errpage.paths`` in order and loads
the first one that exists::

    from errpage.pages import load_error_page

    page = load_error_page("/usr/share/app/html/404.html", "fr-CA")
    if page is not None:
        serve(page.uri, page.body)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from errpage.paths import PathResolver
from errpage.uri import local_to_uri

logger = logging.getLogger("errpage.pages")


@dataclass(frozen=True, slots=True)
class ErrorPage:
    """A located error page: where it is and what it contains."""

    path: str
    uri: str
    body: str


def path_exists(path: str) -> bool:
    """True if *path* is an existing regular file or directory."""
    if not path:
        return False
    return os.path.isfile(path) or os.path.isdir(path)


def read_file(path: str) -> str:
    """Read *path* as UTF-8 text.

    Anything that is not a regular file reads as ``""``. Bytes that are not
    valid UTF-8 are replaced rather than rejected.
    """
    if not path or not os.path.isfile(path):
        return ""
    return Path(path).read_text(encoding="utf-8", errors="replace")


def find_error_page(
    location: str,
    language: str,
    *,
    resolver: PathResolver | None = None,
) -> str | None:
    """Return the first existing candidate for *location*, or ``None``.

    Directories are skipped; only regular files count as a hit.

    Raises:
        PathResolutionError: If the parent directory of *location* does
            not exist.
    """
    resolver = resolver if resolver is not None else PathResolver()
    candidates = resolver.resolve(location, language)
    for candidate in candidates:
        if os.path.isfile(candidate):
            logger.debug("Error page for %s (%s): %s", location, language, candidate)
            return candidate

    if candidates:
        logger.warning(
            "No error page found for %s (%s), tried %d candidates",
            location,
            language,
            len(candidates),
        )
    return None


def load_error_page(
    location: str,
    language: str,
    *,
    resolver: PathResolver | None = None,
) -> ErrorPage | None:
    """Find and read the error page for *location* in *language*."""
    path = find_error_page(location, language, resolver=resolver)
    if path is None:
        return None
    absolute = os.path.abspath(path)
    return ErrorPage(path=path, uri=local_to_uri(absolute), body=read_file(path))
