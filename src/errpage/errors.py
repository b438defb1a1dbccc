"""errpage exception hierarchy.

Shared across the resolver, configuration, and CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class ErrpageError(Exception):
    """Base for all errpage-specific errors."""


class ConfigurationError(ErrpageError):
    """Raised when resolver or environment configuration is invalid.

    Typically raised from ``ResolverConfig.__post_init__`` or
    ``ErrorPageConfig.from_env()``.
    """


@dataclass(frozen=True, slots=True)
class PathResolutionError(ErrpageError):
    """The parent directory of an error page location cannot be canonicalized.

    This is the only failure the path resolver reports. Unparseable
    language tags are not errors; they shrink the candidate list instead.
    """

    path: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.path}: {self.detail}"
        return self.path
