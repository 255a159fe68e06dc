"""Typed models for met.no locationforecast and OpenCage geocoding data.

Only the fields shown on a forecast card are modelled; everything else the
provider sends is kept as extra data so an entry can be dumped back into
the exact upstream shape.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from metforecast.constants import DEFAULT_LAT, DEFAULT_LON
from metforecast.utils.time import TimeUtils

# ─────────────────────────── primitives ──────────────────────────────────────


class Coordinate(BaseModel):
    """Geographic coordinates in degrees.

    No range validation is performed; out-of-range values are passed
    through to the upstream provider unchanged.
    """

    lat: float
    lon: float

    model_config = ConfigDict(frozen=True)

    @classmethod
    def default(cls) -> Coordinate:
        return cls(lat=DEFAULT_LAT, lon=DEFAULT_LON)


class GeocodeResult(BaseModel):
    """Body of the coordinates endpoint."""

    lat: float
    lng: float

    def to_coordinate(self) -> Coordinate:
        return Coordinate(lat=self.lat, lon=self.lng)


# ─────────────────────────── forecast entry ──────────────────────────────────


class InstantDetails(BaseModel):
    """Instantaneous readings; any of them may be absent upstream."""

    air_temperature: float | None = None
    air_pressure_at_sea_level: float | None = None
    relative_humidity: float | None = None
    wind_speed: float | None = None
    wind_from_direction: float | None = None
    cloud_area_fraction: float | None = None

    model_config = ConfigDict(extra="allow", frozen=True)


class Instant(BaseModel):
    details: InstantDetails | None = None

    model_config = ConfigDict(extra="allow", frozen=True)


class Summary(BaseModel):
    symbol_code: str | None = None

    model_config = ConfigDict(extra="allow", frozen=True)


class NextHours(BaseModel):
    summary: Summary | None = None

    model_config = ConfigDict(extra="allow", frozen=True)


class EntryData(BaseModel):
    instant: Instant | None = None
    next_12_hours: NextHours | None = None

    model_config = ConfigDict(extra="allow", frozen=True)


class ForecastEntry(BaseModel):
    """One timeseries sample: a timestamp plus its nested reading."""

    time: datetime
    data: EntryData | None = None

    model_config = ConfigDict(extra="allow", frozen=True)

    @field_validator("time", mode="before")
    @classmethod
    def _parse_time(cls, v: Any) -> Any:
        if isinstance(v, str):
            return TimeUtils.parse_iso(v)
        return v

    @property
    def details(self) -> InstantDetails:
        """Instant details, empty when any level of the reading is missing."""
        instant = self.data.instant if self.data is not None else None
        if instant is None or instant.details is None:
            return InstantDetails()
        return instant.details

    @property
    def symbol_code(self) -> str | None:
        """12-hour summary symbol, if the provider sent one."""
        if self.data is None:
            return None
        nxt = self.data.next_12_hours
        if nxt is None or nxt.summary is None:
            return None
        return nxt.summary.symbol_code
