"""In-memory implementation of the URL shortener mapping store."""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Any

from ..errors import AlreadyExistsError
from .base import MappingStoreBase
from .models import URLRecord
from .rwlock import ReadWriteLock


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryMappingStore(MappingStoreBase):
    """Thread-safe, process-local mapping store.

    Both indexes are guarded by a single readers/writer lock. Lookups share
    the lock; ``insert`` and ``record_hit`` take it exclusively, so a reader
    never sees one index updated without the other.

    Records are frozen; a hit swaps in a copy with the incremented counter,
    and callers only ever hold snapshots.
    """

    def __init__(
        self,
        clock: Optional[Callable[[], datetime]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the store.

        Args:
            clock: Returns the timestamp used for created_at/last_accessed
            logger: Optional logger instance
        """
        self.clock = clock or utc_now
        self.logger = logger or logging.getLogger(__name__)

        self._lock = ReadWriteLock()
        # Insertion order doubles as creation order for list_all.
        self._records: Dict[str, URLRecord] = {}
        self._codes_by_url: Dict[str, str] = {}

    def insert(self, short_code: str, original_url: str) -> URLRecord:
        with self._lock.write_locked():
            if short_code in self._records:
                self.logger.debug(f"Short code already exists: {short_code}")
                raise AlreadyExistsError(f"Short code '{short_code}' already exists")

            record = URLRecord(
                short_code=short_code,
                original_url=original_url,
                created_at=self.clock(),
            )
            self._records[short_code] = record
            # First code stored for a URL stays its dedup answer
            self._codes_by_url.setdefault(original_url, short_code)

        self.logger.debug(f"Stored mapping: {short_code} -> {original_url}")
        return record

    def lookup(self, short_code: str) -> Optional[URLRecord]:
        with self._lock.read_locked():
            return self._records.get(short_code)

    def lookup_by_url(self, original_url: str) -> Optional[str]:
        with self._lock.read_locked():
            return self._codes_by_url.get(original_url)

    def record_hit(self, short_code: str) -> bool:
        with self._lock.write_locked():
            record = self._records.get(short_code)
            if record is None:
                self.logger.debug(f"Hit on unknown short code ignored: {short_code}")
                return False

            self._records[short_code] = replace(
                record,
                clicks=record.clicks + 1,
                last_accessed=self.clock(),
            )
            return True

    def list_all(self) -> List[URLRecord]:
        with self._lock.read_locked():
            return list(self._records.values())

    def get_statistics(self) -> Dict[str, Any]:
        with self._lock.read_locked():
            return {
                "total_urls": len(self._records),
                "total_clicks": sum(r.clicks for r in self._records.values()),
            }

