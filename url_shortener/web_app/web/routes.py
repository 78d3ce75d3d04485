"""Short link redirect route."""

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

from url_shortener.lib.errors import NotFoundError

router = APIRouter()


@router.get("/{short_code}", include_in_schema=False)
def redirect_to_url(request: Request, short_code: str):
    """Redirect to the original URL."""
    service = request.app.state.service

    # Resolving also counts the click
    original_url = service.resolve(short_code)

    if not original_url:
        raise NotFoundError(f"Short code '{short_code}' not found")

    # 302 rather than 301 so browsers come back and every click is counted
    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
