"""Business logic service for URL shortener."""

import logging
import threading
from typing import Callable, Optional, Dict, Any, List
from datetime import datetime, timezone

from .shortcode import ShortCodeGenerator
from .store.base import MappingStoreBase
from .errors import AlreadyExistsError, GenerationExhaustedError, InvalidCodeError
from .common.normalize import normalize_url
from .common.validators import is_valid_short_code


class URLShortenerService:
    """Service layer for URL shortening business logic.

    Decides the short code for each request (dedup first, then a custom
    code or bounded random generation) and delegates storage to the
    mapping store. Safe to call from many threads at once.
    """

    def __init__(
        self,
        store: MappingStoreBase,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        normalizer: Callable[[str], str] = normalize_url,
        enable_custom_codes: bool = True,
        max_generation_attempts: int = 10,
        custom_code_min_length: int = 3,
        custom_code_max_length: int = 20,
        url_lock_stripes: int = 64,
    ):
        """Initialize URL shortener service.

        Args:
            store: Mapping store instance
            short_code_generator: Optional short code generator
            logger: Optional logger
            normalizer: Maps a raw URL to its canonical form
            enable_custom_codes: Whether to allow custom short codes
            max_generation_attempts: Random codes tried before giving up
            custom_code_min_length: Shortest accepted custom code
            custom_code_max_length: Longest accepted custom code
            url_lock_stripes: Number of locks shared out among canonical URLs
        """
        if max_generation_attempts < 1:
            raise ValueError("max_generation_attempts must be at least 1")
        if url_lock_stripes < 1:
            raise ValueError("url_lock_stripes must be at least 1")

        self.store = store
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.normalizer = normalizer
        self.enable_custom_codes = enable_custom_codes
        self.max_generation_attempts = max_generation_attempts
        self.custom_code_min_length = custom_code_min_length
        self.custom_code_max_length = custom_code_max_length

        # Dedup check and insert for one URL run under the same stripe
        self._url_locks = [threading.Lock() for _ in range(url_lock_stripes)]

    def create_short_url(
        self,
        original_url: str,
        custom_code: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Normalize a raw URL and shorten it.

        Raises:
            InvalidURLError: If the URL cannot be normalized
        """
        return self.shorten(self.normalizer(original_url), custom_code=custom_code)

    def shorten(
        self,
        canonical_url: str,
        custom_code: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Produce or reuse the short code for a canonical URL.

        An already-shortened URL returns its existing code even when a
        custom code is supplied.

        Args:
            canonical_url: The normalized URL
            custom_code: Optional custom short code

        Returns:
            Dictionary with short_code, original_url, created_at, reused

        Raises:
            InvalidCodeError: Custom code malformed or custom codes disabled
            AlreadyExistsError: Custom code already taken
            GenerationExhaustedError: Every random code collided
            RandomSourceError: The secure random source failed
        """
        with self._lock_for(canonical_url):
            existing_code = self.store.lookup_by_url(canonical_url)
            if existing_code is not None:
                record = self.store.lookup(existing_code)
                self.logger.debug(f"Reusing short URL: {existing_code} -> {canonical_url}")
                return {
                    "short_code": existing_code,
                    "original_url": canonical_url,
                    "created_at": record.created_at if record else None,
                    "reused": True,
                }

            if custom_code:
                record = self._insert_custom(custom_code, canonical_url)
            else:
                record = self._insert_generated(canonical_url)

        self.logger.info(f"Created short URL: {record.short_code} -> {canonical_url}")

        return {
            "short_code": record.short_code,
            "original_url": record.original_url,
            "created_at": record.created_at,
            "reused": False,
        }

    def resolve(self, short_code: str) -> Optional[str]:
        """Get the original URL for a short code and count the hit.

        Returns:
            Original URL or None if not found
        """
        record = self.store.lookup(short_code)
        if record is None:
            self.logger.warning(f"Short code not found: {short_code}")
            return None

        self.store.record_hit(short_code)
        self.logger.debug(f"Resolved URL: {short_code} -> {record.original_url}")
        return record.original_url

    def get_url_info(self, short_code: str) -> Optional[Dict[str, Any]]:
        """Get complete information about a short URL without counting a hit."""
        record = self.store.lookup(short_code)
        return record.to_dict() if record else None

    def snapshot(self) -> List[Dict[str, Any]]:
        """All mappings, oldest first, as of a single point in time."""
        return [record.to_dict() for record in self.store.list_all()]

    def get_statistics(self) -> Dict[str, Any]:
        return {
            **self.store.get_statistics(),
            "custom_codes_enabled": self.enable_custom_codes,
        }

    def health_check(self) -> Dict[str, Any]:
        """Report service health.

        The store is in-process, so the service is healthy whenever it can
        answer; the store size is included for monitoring.
        """
        return {
            "overall": True,
            "total_urls": self.store.get_statistics()["total_urls"],
            "timestamp": datetime.now(timezone.utc),
        }

    def _lock_for(self, canonical_url: str) -> threading.Lock:
        return self._url_locks[hash(canonical_url) % len(self._url_locks)]

    def _insert_custom(self, custom_code: str, canonical_url: str):
        if not self.enable_custom_codes:
            raise InvalidCodeError("Custom short codes are not enabled")

        is_valid, error = is_valid_short_code(
            custom_code,
            min_length=self.custom_code_min_length,
            max_length=self.custom_code_max_length,
        )
        if not is_valid:
            raise InvalidCodeError(f"Invalid short code: {error}")

        try:
            return self.store.insert(custom_code, canonical_url)
        except AlreadyExistsError:
            self.logger.warning(f"Custom short code already taken: {custom_code}")
            raise

    def _insert_generated(self, canonical_url: str):
        """Try fresh random codes until one inserts.

        Raises:
            GenerationExhaustedError: If every attempt collided
        """
        for attempt in range(1, self.max_generation_attempts + 1):
            code = self.generator.generate_random()
            try:
                record = self.store.insert(code, canonical_url)
            except AlreadyExistsError:
                self.logger.debug(f"Collision on attempt {attempt}: {code}")
                continue

            if attempt > 1:
                self.logger.debug(f"Generated code after {attempt} attempts: {code}")
            return record

        self.logger.error(
            f"Unable to generate unique short code after {self.max_generation_attempts} attempts"
        )
        raise GenerationExhaustedError(
            f"Unable to generate unique short code after {self.max_generation_attempts} attempts"
        )
