"""Data models for URL shortener."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class URLRecord:
    """Represents one short code -> URL mapping held by the store."""

    short_code: str
    original_url: str
    created_at: datetime
    clicks: int = 0
    last_accessed: Optional[datetime] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "short_code": self.short_code,
            "original_url": self.original_url,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "clicks": self.clicks,
            "last_accessed": self.last_accessed.isoformat() if self.last_accessed else None,
        }
