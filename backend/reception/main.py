"""FastAPI application entry point."""
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from reception.config import settings
from reception.errors import ReceptionError, StorageUnavailable

# Import routers
from reception.routers import admin, pages, rsvp

logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Reception RSVP",
    description="Wedding reception site — event page, photo gallery, RSVP form and admin list",
    version="0.1.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(Path(__file__).parent / "static")), name="static")

# Register routers
app.include_router(rsvp.router, prefix="/api/rsvp", tags=["RSVP"])
app.include_router(admin.router, tags=["Admin"])
app.include_router(pages.router, tags=["Pages"])


@app.exception_handler(ReceptionError)
async def reception_error_handler(request: Request, exc: ReceptionError):
    """Every RSVP failure is answered as {ok: false, message}."""
    if isinstance(exc, StorageUnavailable):
        logger.error("Store failure on %s: %s", request.url.path, exc.detail)
    else:
        logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.http_status,
        content={"ok": False, "message": exc.client_message(settings.is_production)},
    )
