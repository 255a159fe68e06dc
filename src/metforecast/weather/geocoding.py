"""Geocoding client for the OpenCage forward geocoding API."""

from __future__ import annotations

import logging
from typing import Any, Final

import requests

from metforecast.settings import UserSettings
from metforecast.weather.errors import (
    LocationNotFoundError,
    NetworkError,
    ParseError,
    UpstreamError,
)
from metforecast.weather.models import GeocodeResult

logger: Final = logging.getLogger(__name__)

GEOCODE_URL: Final = "https://api.opencagedata.com/geocode/v1/json"


def _status_message(resp: requests.Response) -> str:
    """Pull the provider's status message out of an error body."""
    try:
        body: dict[str, Any] = resp.json()
        return str(body["status"]["message"])
    except (ValueError, KeyError, TypeError):
        return resp.text


class GeocodingAPI:
    """Resolves free-text place names to coordinates.

    The API key comes from configuration only; the client refuses nothing
    up front and lets the provider report a missing or invalid key.
    """

    def __init__(self, config: UserSettings) -> None:
        self.config = config
        self.timeout = config.request_timeout

    def resolve(self, location: str) -> GeocodeResult:
        """Return the first match for ``location``.

        Args:
            location: Place name, passed to the provider as typed

        Returns:
            Latitude/longitude of the best match

        Raises:
            NetworkError: When network connectivity issues occur
            UpstreamError: When the provider answers with a non-200 status
            ParseError: When the body is not the expected JSON document
            LocationNotFoundError: When the provider finds no match
        """
        params = {"q": location, "key": self.config.geocoder_api_key}

        try:
            resp = requests.get(GEOCODE_URL, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Geocoding API network error: %s", exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        if resp.status_code != 200:
            msg = _status_message(resp)
            logger.error("Geocoding API error: %s - %s", resp.status_code, msg)
            raise UpstreamError.from_status(resp.status_code, msg)

        try:
            results = resp.json()["results"]
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("Could not parse geocoding response: %s", exc)
            raise ParseError(f"Malformed geocoding response: {exc}", exc) from exc

        if not results:
            logger.info("Geocoding found no match for %r", location)
            raise LocationNotFoundError(location)

        try:
            geometry = results[0]["geometry"]
            return GeocodeResult(lat=geometry["lat"], lng=geometry["lng"])
        except (KeyError, TypeError, ValueError) as exc:
            raise ParseError(f"Malformed geocoding result: {exc}", exc) from exc
