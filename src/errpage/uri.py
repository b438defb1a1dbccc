"""URI helpers: hostname extraction and ``file:`` URI conversion.

Hostname extraction is a two-stage match. The whole string is first split
into scheme, authority, path, query, and fragment with the expression from
RFC 3986 Appendix B; the authority is then matched on its own for an
optional ``userinfo@``, the host, and an optional ``:port``.

The matching is deliberately permissive and never raises. Anything it
cannot make sense of yields ``""``::

    >>> hostname_of("https://user@example.com:8080/path?q=1#frag")
    'example.com'
    >>> hostname_of("not a uri at all///")
    ''
"""

import re
from pathlib import PurePosixPath
from urllib.parse import quote, unquote

# https://datatracker.ietf.org/doc/html/rfc3986#appendix-B
_URI_RE = re.compile(r"^(([^:/?#]+):)?(//([^/?#]*))?([^?#]*)(\?([^#]*))?(#(.*))?")
_AUTHORITY_RE = re.compile(r"(?:[\w:]+@)?([\w.]+):?(?:[0-9]+)?", re.ASCII)

_LOCAL_HOSTS = ("", "localhost")


def authority_of(uri: str) -> str:
    """Return the raw ``user@host:port`` authority of *uri*, or ``""``."""
    if not uri or not isinstance(uri, str):
        return ""
    match = _URI_RE.fullmatch(uri)
    if match is None:
        return ""
    return match.group(4) or ""


def hostname_of(uri: str) -> str:
    """Return the host component of *uri*, or ``""`` if none can be extracted.

    The host is returned as written: no case folding, no percent-decoding,
    no trailing-dot stripping. Hosts are limited to word characters and
    dots, so IP-literals (``[::1]``) and hyphenated names yield ``""``.
    """
    authority = authority_of(uri)
    if not authority:
        return ""
    match = _AUTHORITY_RE.fullmatch(authority)
    if match is None:
        return ""
    return match.group(1)


def uri_to_local(uri: str) -> str:
    """Convert a ``file:`` URI to a local absolute path.

    Returns ``""`` for other schemes, remote hosts, relative paths, and
    empty input.
    """
    if not uri or not isinstance(uri, str):
        return ""
    match = _URI_RE.fullmatch(uri)
    if match is None or (match.group(2) or "").lower() != "file":
        return ""
    # Query and fragment are not part of a file name
    if match.group(6) is not None or match.group(8) is not None:
        return ""

    host = match.group(4) or ""
    if host.lower() not in _LOCAL_HOSTS:
        return ""

    path = unquote(match.group(5))
    if not path.startswith("/") or "\x00" in path:
        return ""
    return path


def local_to_uri(path: str) -> str:
    """Convert an absolute local path to a ``file://`` URI, or ``""``."""
    if not path or not isinstance(path, str):
        return ""
    if not PurePosixPath(path).is_absolute():
        return ""
    return "file://" + quote(path, safe="/!$&'()*+,;=:@-._~")
