"""Forecast API client for the met.no locationforecast service."""

from __future__ import annotations

import logging
from typing import Any, Final

import requests

from metforecast.settings import UserSettings
from metforecast.weather.errors import NetworkError, ParseError, UpstreamError
from metforecast.weather.models import Coordinate

logger: Final = logging.getLogger(__name__)

# API endpoint
API_URL: Final = "https://api.met.no/weatherapi/locationforecast/2.0/compact"

# Human‑readable explanations for common HTTP errors
HTTP_ERROR_MAP: Final = {
    400: "Bad request - check lat/lon parameters",
    403: "Forbidden - missing or blocked User-Agent",
    404: "Coordinates returned no data",
    422: "Coordinates outside the forecast area",
    429: "Rate limit exceeded",
    500: "met.no internal error",
    502: "Bad gateway at met.no",
    503: "Service unavailable (maintenance)",
    504: "Gateway timeout",
}


class LocationForecastAPI:
    """met.no compact locationforecast client.

    The provider rejects anonymous traffic, so every request carries the
    configured ``User-Agent``. Responses are returned as raw timeseries
    dictionaries so that the gateway can hand them back verbatim.
    """

    def __init__(self, config: UserSettings) -> None:
        """Initialize the forecast client.

        Args:
            config: Settings providing the User-Agent and request timeout
        """
        self.config = config
        self.timeout = config.request_timeout

    def fetch_timeseries(self, coord: Coordinate) -> list[dict[str, Any]]:
        """Retrieve the hourly timeseries for a coordinate.

        Args:
            coord: Location to forecast

        Returns:
            The ``properties.timeseries`` list, unmodified

        Raises:
            NetworkError: When network connectivity issues occur
            UpstreamError: When the provider answers with a non-200 status
            ParseError: When the body is not the expected JSON document
        """
        params = {"lat": coord.lat, "lon": coord.lon}
        headers = {"User-Agent": self.config.user_agent}

        try:
            resp = requests.get(
                API_URL, params=params, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            logger.warning("Forecast API network error: %s", exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        if resp.status_code != 200:
            msg = HTTP_ERROR_MAP.get(resp.status_code, resp.text)
            logger.error("Forecast API error: %s - %s", resp.status_code, msg)
            raise UpstreamError.from_status(resp.status_code, msg)

        try:
            body = resp.json()
            timeseries = body["properties"]["timeseries"]
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("Could not parse forecast response: %s", exc)
            raise ParseError(f"Malformed forecast response: {exc}", exc) from exc

        if not isinstance(timeseries, list):
            raise ParseError("Malformed forecast response: timeseries is not a list")

        return timeseries
