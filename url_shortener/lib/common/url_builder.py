"""Public short-link URLs for shortened codes."""

from typing import Mapping, Optional

from .headers import build_base_url, resolve_path_prefix


def build_short_url(
    short_code: str,
    base_url: str,
    path_prefix: str = "",
) -> str:
    """Join base URL, path prefix and short code.

    Empty prefix segments are dropped, so "/s/", "s" and "/s" all give
    the same link and an empty prefix puts the code under the base URL.
    """
    segments = [base_url.rstrip("/")]
    segments.extend(s for s in path_prefix.split("/") if s)
    segments.append(short_code)
    return "/".join(segments)


def short_url_for_request(
    short_code: str,
    headers: Mapping[str, str],
    fallback_base_url: str,
    configured_prefix: str = "",
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
) -> str:
    """Short URL as the client that sent ``headers`` should see it.

    Proxy headers (X-Forwarded-Proto/Host/Prefix) win over the request's own
    scheme and host, which win over the configured base URL and prefix.

    Args:
        short_code: The short code
        headers: Request headers
        fallback_base_url: BASE_URL from configuration
        configured_prefix: PATH_PREFIX from configuration
        request_scheme: Scheme the request arrived on
        request_host: Host header of the request

    Returns:
        Complete short URL
    """
    base_url = build_base_url(
        headers=headers,
        fallback_base_url=fallback_base_url,
        request_scheme=request_scheme,
        request_host=request_host,
    )
    return build_short_url(
        short_code=short_code,
        base_url=base_url,
        path_prefix=resolve_path_prefix(headers, configured_prefix),
    )
