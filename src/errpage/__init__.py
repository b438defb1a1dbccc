"""errpage — localized error-page resource resolution.

Computes where a localized error page may live on disk and extracts
hostnames from URIs for the page that reports them.

Basic usage::

    from errpage import hostname_of, resolve_error_page_paths

    for candidate in resolve_error_page_paths("/srv/app/html/404.html", "zh-Hant-TW"):
        ...

    hostname_of("https://user@example.com:8080/path")  # "example.com"

Candidate probing and loading::

    from errpage import load_error_page

    page = load_error_page("/srv/app/html/404.html", "de-AT")
"""

__version__ = "0.1.0"
__all__ = [
    "BCP47Parser",
    "ConfigurationError",
    "ErrorPage",
    "ErrorPageConfig",
    "ErrpageError",
    "LanguageTag",
    "PathResolutionError",
    "PathResolver",
    "ResolverConfig",
    "find_error_page",
    "hostname_of",
    "load_error_page",
    "parse_language_tag",
    "resolve_error_page_paths",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "BCP47Parser": "errpage.i18n.bcp47",
    "LanguageTag": "errpage.i18n.bcp47",
    "parse_language_tag": "errpage.i18n.bcp47",
    "ConfigurationError": "errpage.errors",
    "ErrpageError": "errpage.errors",
    "PathResolutionError": "errpage.errors",
    "ErrorPageConfig": "errpage.config",
    "ResolverConfig": "errpage.config",
    "PathResolver": "errpage.paths",
    "resolve_error_page_paths": "errpage.paths",
    "hostname_of": "errpage.uri",
    "ErrorPage": "errpage.pages",
    "find_error_page": "errpage.pages",
    "load_error_page": "errpage.pages",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import errpage`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
