"""HTTP client the viewer uses to talk to the forecast gateway."""

from __future__ import annotations

import logging
from typing import Final

import requests
from pydantic import TypeAdapter, ValidationError

from metforecast.settings import UserSettings
from metforecast.weather.models import Coordinate, ForecastEntry, GeocodeResult

logger: Final = logging.getLogger(__name__)

_ENTRIES: Final = TypeAdapter(list[ForecastEntry])


class GatewayError(Exception):
    """Any failed gateway call: transport, status or body.

    The message is kept for logging; the viewer never shows it.
    """

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class GatewayClient:
    """Calls the gateway's forecast and coordinates endpoints."""

    def __init__(self, config: UserSettings) -> None:
        self.base_url = config.gateway_url
        self.timeout = config.request_timeout

    def _get(self, path: str, params: dict[str, object]) -> object:
        url = f"{self.base_url}{path}"
        try:
            resp = requests.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise GatewayError(f"Gateway unreachable: {exc}") from exc

        if resp.status_code != 200:
            try:
                detail = resp.json().get("error", resp.text)
            except (ValueError, AttributeError):
                detail = resp.text
            raise GatewayError(f"Gateway error: {detail}", resp.status_code)

        try:
            return resp.json()
        except ValueError as exc:
            raise GatewayError(f"Gateway returned invalid JSON: {exc}") from exc

    def get_weather(self, coord: Coordinate) -> list[ForecastEntry]:
        """Fetch the filtered forecast for ``coord``.

        Raises:
            GatewayError: On any failure
        """
        body = self._get("/api/weather", {"lat": coord.lat, "lon": coord.lon})
        try:
            return _ENTRIES.validate_python(body)
        except ValidationError as exc:
            raise GatewayError(f"Unexpected forecast body: {exc}") from exc

    def get_coordinates(self, location: str) -> Coordinate:
        """Resolve a place name through the gateway.

        Raises:
            GatewayError: On any failure, including unknown place names
        """
        body = self._get("/api/coordinates", {"location": location})
        try:
            return GeocodeResult.model_validate(body).to_coordinate()
        except ValidationError as exc:
            raise GatewayError(f"Unexpected coordinates body: {exc}") from exc
