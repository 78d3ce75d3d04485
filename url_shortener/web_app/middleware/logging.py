"""Logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable, Optional

from url_shortener.lib.common.headers import extract_forwarded_headers


def client_address(request: Request) -> str:
    """Originating client: first X-Forwarded-For hop, else the peer address."""
    forwarded_for = extract_forwarded_headers(request.headers)["forwarded_for"]
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


class LoggingMiddleware(BaseHTTPMiddleware):
    """One log line per request.

    Redirects are logged with the short code and its target so click
    traffic can be followed in the logs; everything else gets method,
    path, status and duration.
    """

    def __init__(self, app, logger: Optional[logging.Logger] = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger("url_shortener.web")

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        client = client_address(request)
        location = response.headers.get("location")

        if 300 <= response.status_code < 400 and location:
            short_code = request.url.path.rstrip("/").rsplit("/", 1)[-1]
            self.logger.info(
                f"Redirect {short_code} -> {location} - "
                f"Status: {response.status_code} - Client: {client} - Duration: {duration_ms:.2f}ms"
            )
        else:
            self.logger.info(
                f"{request.method} {request.url.path} - "
                f"Status: {response.status_code} - Client: {client} - Duration: {duration_ms:.2f}ms"
            )

        return response
