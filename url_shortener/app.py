#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: request handlers run on the server's thread pool and share one
in-memory store. Setting WORKERS > 1 starts separate processes, and each
process has its own store, so short codes are not shared between them.

Usage:
    url-shortener
    python -m url_shortener.app

Environment variables:
    BASE_URL - Base URL for short links
    PATH_PREFIX - Path prefix for short links
    HOST / PORT - Address to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    SHORT_CODE_LENGTH - Length of generated codes (default 6)
    MAX_GENERATION_ATTEMPTS - Collision retries per request (default 10)
    ENABLE_CUSTOM_CODES - Allow caller-chosen codes
    LOG_LEVEL / LOG_FILE / LOG_JSON - Logging
"""

import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI

from url_shortener.config import Config, load_config
from url_shortener.lib.store import InMemoryMappingStore
from url_shortener.lib.service import URLShortenerService
from url_shortener.lib.shortcode import ShortCodeGenerator
from url_shortener.lib.common.logging_config import setup_logging
from url_shortener.web_app import create_app


def build_service(config: Config, logger: logging.Logger) -> URLShortenerService:
    """Wire a fresh store, generator and service from configuration."""
    store = InMemoryMappingStore(logger=logger.getChild("store"))
    generator = ShortCodeGenerator(default_length=config.short_code_length)

    return URLShortenerService(
        store=store,
        short_code_generator=generator,
        logger=logger.getChild("service"),
        enable_custom_codes=config.enable_custom_codes,
        max_generation_attempts=config.max_generation_attempts,
        custom_code_min_length=config.custom_code_min_length,
        custom_code_max_length=config.custom_code_max_length,
        url_lock_stripes=config.url_lock_stripes,
    )


def build_app(config: Optional[Config] = None) -> FastAPI:
    """Build the application from configuration (the environment by default)."""
    config = config or load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    service = build_service(config, logger)
    return create_app(service_instance=service, config=config, logger=logger)


def main():
    """Main entry point."""
    config = load_config()
    app = build_app(config)

    logger = logging.getLogger("url_shortener")
    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump()}")

    if config.workers > 1:
        # uvicorn needs an import string to spawn workers; each one builds its own app
        app = "url_shortener.app:build_app"

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        uvicorn.run(
            app,
            host=config.host,
            port=config.port,
            workers=config.workers,
            factory=config.workers > 1,
            log_level=config.log_level.lower(),
            access_log=False,
        )
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
