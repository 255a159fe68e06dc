"""Forecast gateway: HTTP-to-HTTP translation with one filtering rule."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final

from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse, Response
from pydantic import BaseModel

from metforecast.constants import DOCS_PATH
from metforecast.settings import UserSettings
from metforecast.weather.api import LocationForecastAPI
from metforecast.weather.errors import (
    AuthenticationError,
    LocationNotFoundError,
    RateLimitError,
    UpstreamError,
)
from metforecast.weather.geocoding import GeocodingAPI
from metforecast.weather.models import Coordinate, ForecastEntry, GeocodeResult
from metforecast.weather.selection import select_afternoon

logger: Final = logging.getLogger(__name__)

router = APIRouter()


class ErrorBody(BaseModel):
    error: str


ERROR_RESPONSES: Final[dict[int | str, dict[str, Any]]] = {
    500: {"model": ErrorBody, "description": "Upstream call failed"},
}


@router.get(
    "/api/weather",
    summary="Get the afternoon forecast",
    response_model=list[ForecastEntry],
    responses=ERROR_RESPONSES,
)
def get_weather(
    request: Request,
    lat: float | None = Query(None, description="Latitude"),
    lon: float | None = Query(None, description="Longitude"),
) -> Response:
    """Samples at 11:00 UTC (14:00 Moscow time), one per forecast day."""
    settings: UserSettings = request.app.state.settings
    coord = Coordinate(
        lat=settings.default_lat if lat is None else lat,
        lon=settings.default_lon if lon is None else lon,
    )
    timeseries = request.app.state.forecast_api.fetch_timeseries(coord)
    # Samples go back exactly as the provider sent them.
    return JSONResponse(content=select_afternoon(timeseries))


@router.get(
    "/api/coordinates",
    summary="Get coordinates for a place name",
    response_model=GeocodeResult,
    responses=ERROR_RESPONSES,
)
def get_coordinates(
    request: Request,
    location: str = Query(..., description="Place name"),
) -> GeocodeResult:
    return request.app.state.geocoding_api.resolve(location)


@router.get("/{full_path:path}", include_in_schema=False)
def spa_fallback(request: Request, full_path: str) -> Response:
    """Serve static assets, falling back to index.html for client routes."""
    static_dir: Path | None = request.app.state.settings.static_dir
    if static_dir is None:
        return JSONResponse(status_code=404, content={"error": "Not found"})

    root = static_dir.resolve()
    candidate = (root / full_path).resolve()
    if full_path and candidate.is_relative_to(root) and candidate.is_file():
        return FileResponse(candidate)

    index = root / "index.html"
    if index.is_file():
        return FileResponse(index)
    return JSONResponse(status_code=404, content={"error": "Not found"})


def upstream_log_level(exc: UpstreamError) -> int:
    """How loudly a provider failure is logged.

    Outages and throttling are transient and only warn. Anything else
    (rejected credentials, an unusable body) needs an operator.
    """
    if isinstance(exc, LocationNotFoundError):
        return logging.INFO
    if exc.provider_unavailable or isinstance(exc, RateLimitError):
        return logging.WARNING
    return logging.ERROR


async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    """Collapse every upstream failure into a generic 500."""
    level = upstream_log_level(exc)
    logger.log(level, "%s %s failed: %s", request.method, request.url.path, exc)
    if isinstance(exc, AuthenticationError):
        logger.error("Check the geocoder API key and the configured User-Agent")
    return JSONResponse(status_code=500, content={"error": exc.message})


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report unusable query parameters through the same error shape."""
    message = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'][1:])}: {err['msg']}"
        for err in exc.errors()
    )
    logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=500, content={"error": message})


def create_app(
    settings: UserSettings | None = None,
    forecast_api: LocationForecastAPI | None = None,
    geocoding_api: GeocodingAPI | None = None,
) -> FastAPI:
    """Build the gateway application.

    Args:
        settings: Gateway configuration (default: ``UserSettings.load()``)
        forecast_api: Optional custom forecast client
        geocoding_api: Optional custom geocoding client

    Returns:
        Configured FastAPI application
    """
    settings = settings or UserSettings.load()
    if not settings.geocoder_api_key:
        logger.warning("No geocoder API key configured; place lookups will fail")

    app = FastAPI(
        title="Weather API",
        version="1.0.0",
        description="Afternoon weather forecast and place-name geocoding",
        docs_url=DOCS_PATH,
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.forecast_api = forecast_api or LocationForecastAPI(settings)
    app.state.geocoding_api = geocoding_api or GeocodingAPI(settings)

    app.add_exception_handler(UpstreamError, upstream_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.include_router(router)
    return app
