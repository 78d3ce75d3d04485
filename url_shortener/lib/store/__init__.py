"""Mapping store layer for URL shortener."""

from .base import MappingStoreBase
from .memory import InMemoryMappingStore
from .models import URLRecord
from .rwlock import ReadWriteLock

__all__ = ["MappingStoreBase", "InMemoryMappingStore", "URLRecord", "ReadWriteLock"]
