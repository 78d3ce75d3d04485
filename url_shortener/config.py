"""Configuration management for URL shortener."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field, model_validator


class Config(BaseSettings):
    """Application configuration."""

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=8080,
        description="Port to listen on"
    )

    workers: int = Field(
        default=1,
        ge=1,
        description="Number of uvicorn worker processes. Each process keeps its own in-memory store."
    )

    # URL shortener settings
    base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL for generating short URLs"
    )

    path_prefix: str = Field(
        default="",
        description="Path prefix for short URLs (e.g., '/s' for /s/abc123)"
    )

    short_code_length: int = Field(
        default=6,
        ge=1,
        description="Length of generated short codes"
    )

    max_generation_attempts: int = Field(
        default=10,
        ge=1,
        description="Random codes tried per request before giving up"
    )

    enable_custom_codes: bool = Field(
        default=True,
        description="Allow users to provide custom short codes"
    )

    custom_code_min_length: int = Field(
        default=3,
        ge=1,
        description="Shortest accepted custom code"
    )

    custom_code_max_length: int = Field(
        default=20,
        ge=1,
        description="Longest accepted custom code"
    )

    url_lock_stripes: int = Field(
        default=64,
        ge=1,
        description="Locks used to serialize concurrent requests for the same URL"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    @model_validator(mode="after")
    def check_custom_code_bounds(self) -> "Config":
        if self.custom_code_min_length > self.custom_code_max_length:
            raise ValueError("custom_code_min_length must not exceed custom_code_max_length")
        return self


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
