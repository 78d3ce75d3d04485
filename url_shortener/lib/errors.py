"""
Error classes for the URL shortener.

Each error carries the HTTP status code the web layer should answer with,
so route handlers never have to inspect error messages.
"""

from typing import Optional, Dict, Any


class ShortenerError(Exception):
    """
    Base URL shortener error.

    Attributes:
        status_code: HTTP status code (default: 500)
        message: Error message
        details: Optional additional error details
    """
    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """
        Initialize error.

        Args:
            message: Error message (overrides default)
            details: Optional additional error details
        """
        self.message = message or self.message
        self.details = details or {}
        super().__init__(self.message)


class InvalidURLError(ShortenerError):
    """URL failed validation or normalization."""
    status_code = 400
    message = "Invalid URL"


class InvalidCodeError(ShortenerError):
    """Custom short code is malformed or not allowed."""
    status_code = 400
    message = "Invalid short code"


class AlreadyExistsError(ShortenerError):
    """Short code is already taken."""
    status_code = 409
    message = "Short code already exists"


class GenerationExhaustedError(ShortenerError):
    """Every generation attempt collided with an existing code."""
    status_code = 503
    message = "Unable to generate unique short code"


class RandomSourceError(ShortenerError):
    """The secure random source failed."""
    status_code = 500
    message = "Secure random source unavailable"


class NotFoundError(ShortenerError):
    """404 Not Found error."""
    status_code = 404
    message = "Not found"
