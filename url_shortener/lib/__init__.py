"""Core business logic for URL shortener."""

from .shortcode import ShortCodeGenerator
from .service import URLShortenerService
from .store import InMemoryMappingStore, URLRecord

__all__ = ["ShortCodeGenerator", "URLShortenerService", "InMemoryMappingStore", "URLRecord"]
