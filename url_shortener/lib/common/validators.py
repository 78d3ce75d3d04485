"""Validation utilities for URL shortener."""

import re
from urllib.parse import urlsplit
from typing import Tuple

MAX_URL_LENGTH = 2048

SHORT_CODE_PATTERN = re.compile(r'[a-zA-Z0-9_-]+')


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"

    try:
        result = urlsplit(url)

        # Check if scheme is http or https
        if result.scheme.lower() not in ["http", "https"]:
            return False, "URL must use http or https protocol"

        # Check if a host exists
        if not result.hostname:
            return False, "URL must have a valid domain"

        # Raises ValueError on a non-numeric or out-of-range port
        result.port

        return True, ""

    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"


def is_valid_short_code(short_code: str, min_length: int = 3, max_length: int = 20) -> Tuple[bool, str]:
    """Validate a custom short code.

    Args:
        short_code: The short code to validate
        min_length: Minimum length for short code
        max_length: Maximum length for short code

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not short_code or not isinstance(short_code, str):
        return False, "Short code is required"

    if len(short_code) < min_length:
        return False, f"Short code must be at least {min_length} characters"

    if len(short_code) > max_length:
        return False, f"Short code must be at most {max_length} characters"

    # Only allow ASCII letters, digits, hyphens, and underscores
    if not SHORT_CODE_PATTERN.fullmatch(short_code):
        return False, "Short code can only contain letters, numbers, hyphens, and underscores"

    return True, ""
