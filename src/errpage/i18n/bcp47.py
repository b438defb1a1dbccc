"""BCP 47 language tag decomposition.

Only the pieces the path resolver consumes survive parsing: the primary
language, the script, and the region. Variants, extensions, and private-use
subtags are validated and then discarded.

Usage::

    from errpage.i18n.bcp47 import parse_language_tag

    tag = parse_language_tag("zh-Hant-TW")
    tag.language   # "zh"
    tag.script     # "Hant"
    tag.region     # "TW"

    parse_language_tag("not a tag")  # None

Any object with a ``parse(tag) -> LanguageTag | None`` method satisfies
``LanguageTagParser`` and can replace ``BCP47Parser`` in the resolver.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

# RFC 5646 section 2.1, without the grandfathered tags.
_LANGTAG_RE = re.compile(
    r"""
    (?P<language>[a-z]{2,3}(?:-[a-z]{3}){0,3}|[a-z]{5,8})
    (?:-(?P<script>[a-z]{4}))?
    (?:-(?P<region>[a-z]{2}|[0-9]{3}))?
    (?:-(?:[a-z0-9]{5,8}|[0-9][a-z0-9]{3}))*
    (?:-[0-9a-wyz](?:-[a-z0-9]{2,8})+)*
    (?:-x(?:-[a-z0-9]{1,8})+)?
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True, slots=True)
class LanguageTag:
    """A decomposed language tag. Immutable.

    ``script`` and ``region`` are ``None`` when absent; check
    ``has_script`` / ``has_region`` before relying on them.
    """

    language: str
    script: str | None = None
    region: str | None = None

    @property
    def has_script(self) -> bool:
        return bool(self.script)

    @property
    def has_region(self) -> bool:
        return bool(self.region)

    def __str__(self) -> str:
        return "-".join(part for part in (self.language, self.script, self.region) if part)


@runtime_checkable
class LanguageTagParser(Protocol):
    """Port for turning a tag string into a ``LanguageTag``."""

    def parse(self, tag: str) -> LanguageTag | None: ...


class BCP47Parser:
    """Regex-based parser for well-formed BCP 47 tags.

    Accepts ``_`` as a separator and strips POSIX codeset and modifier
    suffixes, so ``LANG`` values such as ``pt_BR.UTF-8`` or
    ``ca_ES@valencia`` parse. Matching is case-insensitive; results are
    canonically cased (``zh-Hant-TW``).
    """

    __slots__ = ()

    def parse(self, tag: str) -> LanguageTag | None:
        """Decompose *tag*, or return ``None`` if it is not well-formed."""
        if not tag or not isinstance(tag, str):
            return None

        normalized = _strip_posix_suffix(tag.strip()).replace("_", "-")
        match = _LANGTAG_RE.fullmatch(normalized)
        if match is None:
            return None

        # Extended language subtags ("zh-yue") fold into the primary language
        language = match.group("language").split("-", 1)[0].lower()
        script = match.group("script")
        region = match.group("region")
        return LanguageTag(
            language=language,
            script=script.title() if script else None,
            region=region.upper() if region else None,
        )


def _strip_posix_suffix(tag: str) -> str:
    """Drop ``.codeset`` and ``@modifier`` from a POSIX locale name."""
    for marker in (".", "@"):
        tag = tag.split(marker, 1)[0]
    return tag


_default_parser = BCP47Parser()


def parse_language_tag(tag: str) -> LanguageTag | None:
    """Parse *tag* with the shared default ``BCP47Parser``."""
    return _default_parser.parse(tag)
