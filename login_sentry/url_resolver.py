"""
URL resolution for plain HTTP log sources.

Splits "http://host[:port][/path]" into its host, port and path parts.
"""

from typing import Tuple

DEFAULT_PORT = "80"
DEFAULT_PATH = "/"


class InvalidURLError(ValueError):
    """Raised when a URL cannot be broken down into host, port and path."""


def resolve_url(url: str) -> Tuple[str, str, str]:
    """
    Break a URL down into hostname, port and path.

    Args:
        url: URL such as "http://logs.example.com:8080/auth.log"

    Returns:
        tuple: (host, port, path); port defaults to "80" and path to "/"

    Raises:
        InvalidURLError: if the URL has no "//" separator or no host
    """
    separator = url.find("//")
    if separator == -1:
        raise InvalidURLError(f"Malformed URL (missing '//'): {url!r}")

    remainder = url[separator + 2:]
    slash = remainder.find("/")
    authority = remainder if slash == -1 else remainder[:slash]
    path = DEFAULT_PATH if slash == -1 else remainder[slash:]

    host, colon, port = authority.partition(":")
    if not colon or not port:
        port = DEFAULT_PORT

    if not host:
        raise InvalidURLError(f"Malformed URL (missing host): {url!r}")

    return host, port, path
