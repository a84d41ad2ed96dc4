"""Shared Jinja2 environment for the HTML pages."""
from pathlib import Path

from fastapi import Response
from fastapi.templating import Jinja2Templates

from reception.config import settings
from reception.services.rsvp_service import format_created_at

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
templates.env.filters["event_time"] = lambda value: format_created_at(value, settings.EVENT_TIMEZONE)
templates.env.globals["settings"] = settings


def no_cache(response: Response) -> Response:
    """Pages show live store data; keep browsers and proxies from caching them."""
    response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
    response.headers["Pragma"] = "no-cache"
    return response
