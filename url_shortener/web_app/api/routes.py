"""API routes implementation.

Handlers are plain functions; FastAPI runs them on its thread pool, so
requests reach the service concurrently.
"""

from typing import List

from fastapi import APIRouter, Request

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    URLInfoResponse,
    HealthResponse,
    ErrorResponse,
    StatisticsResponse,
)
from url_shortener.lib.errors import NotFoundError
from url_shortener.lib.common.url_builder import short_url_for_request

router = APIRouter()


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid URL or custom code"},
        409: {"model": ErrorResponse, "description": "Short code already exists"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
        503: {"model": ErrorResponse, "description": "No free short code found, retry"},
    },
    summary="Create short URL",
    description="Create a shortened URL, or return the existing one for the same URL. Optionally provide a custom short code.",
)
def shorten_url(request: Request, body: ShortenRequest):
    """Create a shortened URL."""
    service = request.app.state.service
    config = request.app.state.config

    result = service.create_short_url(
        original_url=body.url,
        custom_code=body.custom_code or None,
    )

    short_url = short_url_for_request(
        short_code=result["short_code"],
        headers=dict(request.headers),
        fallback_base_url=config.base_url,
        configured_prefix=config.path_prefix,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )

    return ShortenResponse(short_url=short_url, **result)


@router.get(
    "/urls",
    response_model=List[URLInfoResponse],
    summary="List URLs",
    description="List every shortened URL, oldest first.",
)
def list_urls(request: Request):
    """List all URL mappings."""
    service = request.app.state.service

    return [URLInfoResponse(**info) for info in service.snapshot()]


@router.get(
    "/urls/{short_code}",
    response_model=URLInfoResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Short code not found"},
    },
    summary="Get URL information",
    description="Get information about a shortened URL including click count. Does not count as a click.",
)
def get_url_info(request: Request, short_code: str):
    """Get information about a shortened URL."""
    service = request.app.state.service

    info = service.get_url_info(short_code)

    if not info:
        raise NotFoundError(f"Short code '{short_code}' not found")

    return URLInfoResponse(**info)


@router.get(
    "/stats",
    response_model=StatisticsResponse,
    summary="Get statistics",
    description="Get service-wide statistics.",
)
def get_statistics(request: Request):
    """Get service statistics."""
    service = request.app.state.service

    return StatisticsResponse(**service.get_statistics())


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        total_urls=health["total_urls"],
        timestamp=health["timestamp"],
    )
