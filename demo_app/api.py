"""FastAPI application serving the home and health pages."""
from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from .config import Settings
from .errors import RenderError
from .metrics import PsutilMetricsProvider, SystemMetricsProvider
from .models import TimeView
from .rendering import JinjaRenderer, Renderer

PUBLIC_DIR = Path(__file__).resolve().parent / "public"

logger = logging.getLogger(__name__)


class PublicFiles(StaticFiles):
    """Static files where anything but GET/HEAD is treated as an unmatched path."""

    async def get_response(self, path: str, scope):
        if scope["method"] not in ("GET", "HEAD"):
            raise HTTPException(status_code=404)
        return await super().get_response(path, scope)


def format_local_time(now: Optional[dt.datetime] = None) -> str:
    """Human-readable local time in the current locale's date and time representation."""
    return (now or dt.datetime.now()).strftime("%c")


def create_app(
    settings: Optional[Settings] = None,
    metrics: Optional[SystemMetricsProvider] = None,
    renderer: Optional[Renderer] = None,
    public_dir: Path = PUBLIC_DIR,
) -> FastAPI:
    app = FastAPI(
        title="DevOps Demo App",
        description="Demo service showing the server time and process health.",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings or Settings()
    app.state.metrics = metrics or PsutilMetricsProvider()
    app.state.renderer = renderer or JinjaRenderer()

    @app.exception_handler(RenderError)
    async def render_error_handler(request: Request, exc: RenderError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
        return HTMLResponse("<h1>500 Internal Server Error</h1>", status_code=500)

    @app.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse, summary="Landing page with the server time")
    async def home(request: Request):
        view = TimeView(current_time=format_local_time())
        return request.app.state.renderer.render("index", view.as_dict())

    @app.api_route("/health", methods=["GET", "HEAD"], response_class=HTMLResponse, summary="Process and host health report")
    async def health(request: Request):
        report = request.app.state.metrics.collect_health_metrics()
        return request.app.state.renderer.render("health", {"healthData": report.as_dict()})

    # Mounted last so the routes above win over same-named files.
    app.mount("/", PublicFiles(directory=str(public_dir)), name="static")

    return app
