"""Localized resource path resolution.

Expands an error page location and a language tag into the ordered list
of files a renderer should probe, most specific first::

    {dir}/resources/{language}/{script}/{region}/html/{file}
    {dir}/resources/{language}/{region}/html/{file}
    {dir}/resources/{language}/html/{file}
    {dir}/resources/html/{file}
    {location}

``{dir}`` is the canonical (absolute, symlink-free) parent directory of
the location. The last entry is the location exactly as given.

The resolver never checks whether candidates exist; see
``errpage.pages`` for that.
"""

from __future__ import annotations

import errno
import logging
import os
from pathlib import Path, PurePath
from typing import Protocol

from errpage.config import ResolverConfig
from errpage.errors import PathResolutionError
from errpage.i18n.bcp47 import BCP47Parser, LanguageTag, LanguageTagParser

logger = logging.getLogger("errpage.paths")


class Canonicalizer(Protocol):
    """Turns a directory into its canonical absolute form.

    Must raise ``OSError`` (usually ``FileNotFoundError``) when the
    directory does not exist.
    """

    def __call__(self, directory: str) -> str: ...


def canonical_directory(directory: str) -> str:
    """Resolve *directory* against the real filesystem, strictly.

    Every failure surfaces as ``OSError``: symlink loops (``RuntimeError``
    before Python 3.13) become ``ELOOP`` and unrepresentable paths such as
    ones with an embedded NUL become ``EINVAL``.
    """
    try:
        return str(Path(directory).resolve(strict=True))
    except RuntimeError as exc:
        raise OSError(errno.ELOOP, os.strerror(errno.ELOOP), directory) from exc
    except ValueError as exc:
        raise OSError(errno.EINVAL, str(exc), directory) from exc


class PathResolver:
    """Builds candidate lists for localized error pages.

    The language tag parser and the directory canonicalizer are injected
    so the resolver can be exercised without a real filesystem::

        resolver = PathResolver(canonicalize=lambda d: "/srv/app")
        resolver.resolve("/srv/app/404.html", "de-AT")

    Instances hold no per-call state and are safe to share across threads.
    """

    __slots__ = ("_canonicalize", "_config", "_parser")

    def __init__(
        self,
        parser: LanguageTagParser | None = None,
        canonicalize: Canonicalizer | None = None,
        config: ResolverConfig | None = None,
    ) -> None:
        self._parser = parser if parser is not None else BCP47Parser()
        self._canonicalize = canonicalize if canonicalize is not None else canonical_directory
        self._config = config if config is not None else ResolverConfig()

    def resolve(self, base_path: str, language: str) -> tuple[str, ...]:
        """Return the candidate paths for *base_path* in *language*.

        An empty *base_path* yields an empty tuple. An empty or malformed
        *language* is not an error: only the two generic candidates are
        returned.

        Raises:
            PathResolutionError: If the parent directory of *base_path*
                cannot be canonicalized.
        """
        if not base_path:
            return ()

        location = PurePath(base_path)
        filename = location.name
        directory = self._resolve_directory(str(location.parent))
        resources = os.path.join(directory, self._config.resources_dir)
        html_dir = self._config.html_dir

        candidates: list[str] = []
        tag = self._parser.parse(language)
        if tag is not None:
            candidates.extend(
                os.path.join(resources, *segments, html_dir, filename)
                for segments in _locale_segments(tag)
            )
        elif language:
            logger.debug("Unparseable language tag %r, using generic candidates", language)

        candidates.append(os.path.join(resources, html_dir, filename))
        candidates.append(base_path)

        logger.debug("Resolved %d candidates for %s (%s)", len(candidates), base_path, language)
        return tuple(candidates)

    def _resolve_directory(self, directory: str) -> str:
        try:
            return self._canonicalize(directory)
        except OSError as exc:
            detail = exc.strerror or str(exc)
            raise PathResolutionError(path=directory, detail=detail) from exc


def _locale_segments(tag: LanguageTag) -> list[tuple[str, ...]]:
    """Directory segments for each locale-specific candidate, most specific first."""
    segments: list[tuple[str, ...]] = []
    if tag.has_script:
        if tag.has_region:
            segments.append((tag.language, tag.script, tag.region))
        else:
            segments.append((tag.language, tag.script))
    if tag.has_region:
        segments.append((tag.language, tag.region))
    segments.append((tag.language,))
    return segments


def resolve_error_page_paths(
    base_path: str,
    language: str,
    *,
    parser: LanguageTagParser | None = None,
    canonicalize: Canonicalizer | None = None,
    config: ResolverConfig | None = None,
) -> tuple[str, ...]:
    """Functional form of ``PathResolver(...).resolve(base_path, language)``."""
    resolver = PathResolver(parser=parser, canonicalize=canonicalize, config=config)
    return resolver.resolve(base_path, language)
