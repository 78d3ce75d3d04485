"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from url_shortener.lib.errors import ShortenerError
from .api import api_router
from .web import web_router
from .middleware.logging import LoggingMiddleware


def create_app(
    service_instance,
    config,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        service_instance: URLShortenerService the routes delegate to
        config: Configuration instance
        logger: Optional logger for request and error logging

    Returns:
        Configured FastAPI app
    """
    web_logger = logger.getChild("web") if logger else logging.getLogger("url_shortener.web")

    app = FastAPI(
        title="URL Shortener",
        description="In-memory URL shortening service",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    # Store instances in app state for access in routes
    app.state.service = service_instance
    app.state.config = config

    @app.exception_handler(ShortenerError)
    async def shortener_error_handler(request: Request, exc: ShortenerError):
        """Turn service errors into JSON responses with the error's status code."""
        if exc.status_code >= 500:
            web_logger.error(f"Error in {request.url.path}: {exc.message}")
        else:
            web_logger.warning(f"Rejected {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, "details": exc.details},
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware, logger=web_logger)

    app.include_router(api_router, prefix="/api", tags=["API"])
    # Catch-all /{short_code} goes last
    app.include_router(web_router, tags=["Web"])

    return app
