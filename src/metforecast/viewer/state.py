"""Viewer session state as an immutable snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from metforecast.constants import DEFAULT_LOCATION, Language
from metforecast.weather.models import Coordinate, ForecastEntry


@dataclass(frozen=True)
class ViewerState:
    """Everything the viewer shows, replaced wholesale on every transition.

    ``coordinate`` is the last coordinate a forecast was requested for,
    while ``pending`` holds the coordinate the user is staging; the two
    only meet when the staged pair is submitted.
    """

    search_text: str = DEFAULT_LOCATION
    coordinate: Coordinate = field(default_factory=Coordinate.default)
    pending: Coordinate = field(default_factory=Coordinate.default)
    language: Language = Language.EN
    loading: bool = False
    entries: tuple[ForecastEntry, ...] = ()

    def evolve(self, **changes: object) -> ViewerState:
        return replace(self, **changes)  # type: ignore[arg-type]

    @property
    def has_data(self) -> bool:
        return bool(self.entries)
