"""URL validation, parsing and homepage derivation utilities"""

import re
from typing import Any, NamedTuple
from urllib.parse import urlsplit

# Based on https://gist.github.com/dperini/729294
_URL_PATTERN = re.compile(
    # protocol identifier
    r"(?:(?:https?|ftp)://)"
    # user:pass authentication
    r"(?:\S+(?::\S*)?@)?"
    r"(?:"
    # private & local networks
    r"(?!(?:10|127)(?:\.[0-9]{1,3}){3})"
    r"(?!(?:169\.254|192\.168)(?:\.[0-9]{1,3}){2})"
    r"(?!172\.(?:1[6-9]|2[0-9]|3[0-1])(?:\.[0-9]{1,3}){2})"
    # IP address dotted notation octets, excluding 0.0.0.0, >= 224.0.0.0
    # and the network & broadcast addresses
    r"(?:[1-9][0-9]?|1[0-9][0-9]|2[01][0-9]|22[0-3])"
    r"(?:\.(?:1?[0-9]{1,2}|2[0-4][0-9]|25[0-5])){2}"
    r"(?:\.(?:[1-9][0-9]?|1[0-9][0-9]|2[0-4][0-9]|25[0-4]))"
    r"|"
    # host name
    r"(?:(?:[a-z\u00a1-\uffff0-9]-*)*[a-z\u00a1-\uffff0-9]+)"
    # domain name
    r"(?:\.(?:[a-z\u00a1-\uffff0-9]-*)*[a-z\u00a1-\uffff0-9]+)*"
    # TLD identifier, may end with a dot
    r"(?:\.(?:[a-z\u00a1-\uffff]{2,}))"
    r"\.?"
    r")"
    # port number
    r"(?::[0-9]{2,5})?"
    # resource path
    r"(?:[/?#]\S*)?",
    re.IGNORECASE,
)

_SUBDOMAIN_PATTERN = re.compile(r"(?:https*://)*(.*?)\.(?=[^/]*\..{2,5})", re.IGNORECASE)


class UrlParts(NamedTuple):
    """Components of a URL as used by the feature detectors"""

    scheme: str
    hostname: str
    path: str
    has_slashes: bool


def is_valid_url(candidate: Any) -> bool:
    """
    Check if a string has the shape of an http, https or ftp URL.

    Public hosts only: private, loopback and link-local IPv4 ranges are
    rejected, as are bare hostnames without a top-level domain.

    Args:
        candidate: String to validate

    Returns:
        True if the whole string matches the URL pattern

    Examples:
        >>> is_valid_url("http://api.twitter.com/v1")
        True
        >>> is_valid_url("http://192.168.0.1")
        False
        >>> is_valid_url("some sting - no url")
        False
    """
    if not isinstance(candidate, str):
        return False
    return _URL_PATTERN.fullmatch(candidate) is not None


def split_url(url: str) -> UrlParts:
    """
    Split a URL into scheme, hostname and path without ever raising.

    ``urlsplit`` rejects some malformed netlocs (e.g. an unbalanced ``[``);
    those inputs are reported with empty components.

    Args:
        url: URL to split

    Returns:
        UrlParts with a lower-cased scheme and hostname
    """
    try:
        parsed = urlsplit(url)
        hostname = parsed.hostname or ""
    except ValueError:
        return UrlParts(scheme="", hostname="", path="", has_slashes=False)

    scheme = parsed.scheme.lower()
    has_slashes = bool(scheme) and url[len(scheme) + 1 :].startswith("//")
    return UrlParts(scheme=scheme, hostname=hostname, path=parsed.path, has_slashes=has_slashes)


def has_query_string(url: str) -> bool:
    """True if the URL carries a query component, even an empty one"""
    return "?" in url.partition("#")[0]


def strip_query_and_fragment(url: str) -> str:
    """Cut a URL at its first ``?`` or ``#``"""
    return re.split(r"[?#]", url, maxsplit=1)[0]


def count_path_segments(url: str) -> int:
    """
    Count the segments of a URL path.

    The root path and an empty path have no segments. A trailing slash
    counts as an extra (empty) segment.

    Examples:
        >>> count_path_segments("http://example.com/")
        0
        >>> count_path_segments("http://example.com/a/b")
        2
        >>> count_path_segments("http://example.com/a/b/")
        3
    """
    path = split_url(url).path
    if path in ("", "/"):
        return 0
    return len(path.split("/")) - 1


def get_subdomain(url: str) -> str | None:
    """
    Guess the subdomain of a URL.

    This is a single-pass heuristic: everything before the first dot that
    is followed by another dot and a 2-5 character tail counts as the
    subdomain. It does not consult a public suffix list.

    Args:
        url: URL to inspect

    Returns:
        Subdomain string, or None if the URL does not look like it has one

    Examples:
        >>> get_subdomain("http://api.test.com/users")
        'api'
        >>> get_subdomain("http://test.com") is None
        True
    """
    match = _SUBDOMAIN_PATTERN.search(url)
    if match:
        return match.group(1)
    return None


def get_homepage(url: str) -> str:
    """
    Get the 'home' page of a URL.

    Keeps only scheme and host, replacing any subdomain with ``www``.

    Args:
        url: URL to reduce

    Returns:
        Homepage URL

    Examples:
        >>> get_homepage("http://api.test.com/users")
        'http://www.test.com'
        >>> get_homepage("https://test.com/docs")
        'https://test.com'
    """
    parts = split_url(url)
    hostname = parts.hostname

    subdomain = get_subdomain(url)
    if subdomain:
        hostname = "www." + hostname[len(subdomain) + 1 :]

    prefix = f"{parts.scheme}:" if parts.scheme else ""
    if parts.has_slashes:
        prefix += "//"
    return prefix + hostname


def is_homepage(url: str) -> bool:
    """True if the URL is exactly its own homepage (scheme and host, no path)"""
    return url == get_homepage(url)
