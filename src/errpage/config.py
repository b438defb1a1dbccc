"""Resolver and error-page configuration.

Both configs are frozen dataclasses, immutable after creation. The
resolver's directory layout can be overridden::

    config = ResolverConfig(resources_dir="assets", html_dir="pages")

``ErrorPageConfig.from_env()`` reads the defaults the CLI falls back to.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from errpage.errors import ConfigurationError

# Environment variables read by ErrorPageConfig.from_env()
ENV_LOCATION = "ERRPAGE_LOCATION"
ENV_LANGUAGE = "ERRPAGE_LANGUAGE"
ENV_RESOURCES_DIR = "ERRPAGE_RESOURCES_DIR"
ENV_HTML_DIR = "ERRPAGE_HTML_DIR"


def _check_segment(name: str, value: str) -> None:
    if not value:
        msg = f"{name} must not be empty"
        raise ConfigurationError(msg)
    if "/" in value or os.sep in value or (os.altsep and os.altsep in value):
        msg = f"{name} must be a single path segment, got {value!r}"
        raise ConfigurationError(msg)
    if value in (".", ".."):
        msg = f"{name} must not be a relative directory reference, got {value!r}"
        raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Directory segment names used when building candidate paths.

    Candidates look like ``{dir}/{resources_dir}/{language}/{html_dir}/{file}``.
    """

    resources_dir: str = "resources"
    html_dir: str = "html"

    def __post_init__(self) -> None:
        _check_segment("resources_dir", self.resources_dir)
        _check_segment("html_dir", self.html_dir)


@dataclass(frozen=True, slots=True)
class ErrorPageConfig:
    """Where the error page lives and which language to prefer."""

    location: str = ""
    language: str = ""
    resolver: ResolverConfig = field(default_factory=ResolverConfig)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ErrorPageConfig":
        """Build a config from environment variables.

        ``ERRPAGE_LANGUAGE`` falls back to ``LANG`` so POSIX locales such
        as ``de_DE.UTF-8`` work unchanged. Unset variables read as empty
        strings; unset directory names keep their defaults.
        """
        env = os.environ if environ is None else environ

        language = env.get(ENV_LANGUAGE, "") or env.get("LANG", "")
        resolver_kwargs = {}
        if resources_dir := env.get(ENV_RESOURCES_DIR, ""):
            resolver_kwargs["resources_dir"] = resources_dir
        if html_dir := env.get(ENV_HTML_DIR, ""):
            resolver_kwargs["html_dir"] = html_dir

        return cls(
            location=env.get(ENV_LOCATION, ""),
            language=language.strip(),
            resolver=ResolverConfig(**resolver_kwargs),
        )
