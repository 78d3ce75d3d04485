"""In-memory URL shortener: deduplicating mapping store, short code resolver and FastAPI app."""

__version__ = "1.0.0"
