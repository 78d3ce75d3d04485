"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
from datetime import datetime


class ShortenRequest(BaseModel):
    """Request to shorten a URL."""

    url: str = Field(..., description="The URL to shorten", min_length=1)
    custom_code: Optional[str] = Field(None, description="Optional custom short code")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "url": "https://example.com/very/long/path/to/resource",
                    "custom_code": None
                },
                {
                    "url": "https://github.com/user/repo",
                    "custom_code": "myrepo"
                }
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    short_code: str = Field(..., description="The short code")
    short_url: str = Field(..., description="The complete short URL")
    original_url: str = Field(..., description="The canonical form of the submitted URL")
    created_at: datetime = Field(..., description="Creation timestamp of the mapping")
    reused: bool = Field(..., description="True when the URL was already shortened")


class URLInfoResponse(BaseModel):
    """Response with URL information."""

    short_code: str
    original_url: str
    created_at: datetime
    clicks: int
    last_accessed: Optional[datetime] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    total_urls: int = Field(..., description="Mappings currently stored")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
    details: Dict[str, Any] = Field(default_factory=dict, description="Additional error information")


class StatisticsResponse(BaseModel):
    """Statistics response."""

    total_urls: int
    total_clicks: int
    custom_codes_enabled: bool
