"""Abstract base class for URL shortener mapping stores."""

from abc import ABC, abstractmethod
from typing import Optional, List, Dict, Any

from .models import URLRecord


class MappingStoreBase(ABC):
    """Abstract base class for the code -> URL mapping store.

    Implementations own both the primary index (short code -> record) and
    the reverse index (canonical URL -> short code) and keep them consistent.
    """

    @abstractmethod
    def insert(self, short_code: str, original_url: str) -> URLRecord:
        """Create a new mapping.

        Args:
            short_code: The short code to use
            original_url: The canonical URL

        Returns:
            The newly created record

        Raises:
            AlreadyExistsError: If short_code is already present
        """
        pass

    @abstractmethod
    def lookup(self, short_code: str) -> Optional[URLRecord]:
        """Get the record for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            The record if found, None otherwise
        """
        pass

    @abstractmethod
    def lookup_by_url(self, original_url: str) -> Optional[str]:
        """Get the short code mapped to a canonical URL.

        Args:
            original_url: The canonical URL

        Returns:
            The short code if found, None otherwise
        """
        pass

    @abstractmethod
    def record_hit(self, short_code: str) -> bool:
        """Increment the click count for a short code.

        A missing code is not an error.

        Args:
            short_code: The short code to update

        Returns:
            True if a record was updated, False if the code is unknown
        """
        pass

    @abstractmethod
    def list_all(self) -> List[URLRecord]:
        """Return every record, oldest first, as of a single point in time."""
        pass

    @abstractmethod
    def get_statistics(self) -> Dict[str, Any]:
        """Get store statistics.

        Returns:
            Dictionary with total_urls and total_clicks
        """
        pass
