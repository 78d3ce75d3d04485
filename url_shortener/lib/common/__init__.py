"""Common utilities for URL shortener."""

from .validators import is_valid_url, is_valid_short_code
from .normalize import normalize_url
from .headers import extract_forwarded_headers, build_base_url, resolve_path_prefix
from .url_builder import build_short_url, short_url_for_request
from .logging_config import setup_logging

__all__ = [
    "is_valid_url",
    "is_valid_short_code",
    "normalize_url",
    "extract_forwarded_headers",
    "build_base_url",
    "resolve_path_prefix",
    "build_short_url",
    "short_url_for_request",
    "setup_logging",
]
