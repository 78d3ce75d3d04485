"""Canonical URL form used for deduplication."""

from urllib.parse import urlsplit, urlunsplit

from ..errors import InvalidURLError
from .validators import MAX_URL_LENGTH, is_valid_url

DEFAULT_PORTS = {"http": 80, "https": 443}


def normalize_url(url: str) -> str:
    """Return the canonical form of a URL.

    Lowercases the scheme and host, drops the default port for the scheme,
    and trims trailing slashes from the path. An empty path becomes "/".
    Query string and fragment are kept as-is. Applying it twice gives the
    same result as applying it once, and the result never exceeds
    MAX_URL_LENGTH.

    Args:
        url: The URL to normalize

    Returns:
        Canonical URL string

    Raises:
        InvalidURLError: If the URL is not a valid http(s) URL, or its
            canonical form is too long
    """
    if isinstance(url, str):
        url = url.strip()

    is_valid, error = is_valid_url(url)
    if not is_valid:
        raise InvalidURLError(f"Invalid URL: {error}")

    parts = urlsplit(url)
    scheme = parts.scheme.lower()

    host = parts.hostname
    if ":" in host:
        host = f"[{host}]"

    netloc = host
    if parts.port is not None and parts.port != DEFAULT_PORTS[scheme]:
        netloc = f"{host}:{parts.port}"

    userinfo = parts.netloc.rpartition("@")[0]
    if userinfo:
        netloc = f"{userinfo}@{netloc}"

    path = parts.path.rstrip("/") or "/"

    canonical = urlunsplit((scheme, netloc, path, parts.query, parts.fragment))

    # The canonical form must itself pass validation
    if len(canonical) > MAX_URL_LENGTH:
        raise InvalidURLError(
            f"Invalid URL: URL is too long (max {MAX_URL_LENGTH} characters)"
        )

    return canonical
