"""Header parsing utilities for URL shortener."""

from typing import Mapping, Dict, Optional


def _lower_keys(headers: Mapping[str, str]) -> Dict[str, str]:
    return {k.lower(): v for k, v in headers.items()}


def extract_forwarded_headers(headers: Mapping[str, str]) -> Dict[str, Optional[str]]:
    """Extract X-Forwarded-* headers from request.

    Args:
        headers: Request headers mapping

    Returns:
        Dictionary with forwarded_proto, forwarded_host, forwarded_for, forwarded_prefix
    """
    headers_lower = _lower_keys(headers)

    return {
        "forwarded_proto": headers_lower.get("x-forwarded-proto"),
        "forwarded_host": headers_lower.get("x-forwarded-host"),
        "forwarded_for": headers_lower.get("x-forwarded-for"),
        "forwarded_prefix": headers_lower.get("x-forwarded-prefix"),
    }


def build_base_url(
    headers: Mapping[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
) -> str:
    """Build the public base URL for short links.

    Priority:
    1. X-Forwarded-Proto + X-Forwarded-Host
    2. Request scheme + host
    3. Fallback base URL from config

    Args:
        headers: Request headers
        fallback_base_url: Fallback base URL from configuration
        request_scheme: Request scheme (http/https)
        request_host: Request host

    Returns:
        Base URL without trailing slash (e.g., https://example.com)
    """
    forwarded = extract_forwarded_headers(headers)

    if forwarded["forwarded_proto"] and forwarded["forwarded_host"]:
        return f"{forwarded['forwarded_proto']}://{forwarded['forwarded_host']}"

    if request_scheme and request_host:
        return f"{request_scheme}://{request_host}"

    return fallback_base_url.rstrip("/")


def resolve_path_prefix(headers: Mapping[str, str], configured_prefix: str = "") -> str:
    """Path prefix for short links: X-Forwarded-Prefix (set by a proxy that
    strips it) wins over the configured prefix.

    Returns a prefix with a leading slash and no trailing slash, or ''.
    """
    prefix = extract_forwarded_headers(headers)["forwarded_prefix"] or configured_prefix or ""
    prefix = prefix.strip().strip("/")
    return "/" + prefix if prefix else ""
