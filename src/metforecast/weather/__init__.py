"""Weather package - upstream API clients, models, selection and errors."""

from .api import LocationForecastAPI
from .errors import (
    LocationNotFoundError,
    NetworkError,
    ParseError,
    UpstreamError,
)
from .geocoding import GeocodingAPI
from .models import Coordinate, ForecastEntry, GeocodeResult
from .selection import select_afternoon

__all__ = [
    "Coordinate",
    "ForecastEntry",
    "GeocodeResult",
    "GeocodingAPI",
    "LocationForecastAPI",
    "LocationNotFoundError",
    "NetworkError",
    "ParseError",
    "UpstreamError",
    "select_afternoon",
]
