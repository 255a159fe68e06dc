# filepath: src/metforecast/viewer/controller.py
"""Core controller for the forecast viewer."""

from __future__ import annotations

import logging
import webbrowser
from pathlib import Path
from typing import Final

from metforecast.settings import ApplicationSettings, UserSettings
from metforecast.viewer.client import GatewayClient, GatewayError
from metforecast.viewer.render import PageContextBuilder, TemplateRenderer
from metforecast.viewer.state import ViewerState
from metforecast.weather.models import Coordinate

logger: Final = logging.getLogger(__name__)


class ForecastViewer:
    """Collects input, calls the gateway, and renders results.

    Every transition replaces ``self.state`` with a new snapshot. The
    ``loading`` flag is informational only; nothing stops two fetches from
    overlapping if callers issue them concurrently.
    """

    def __init__(
        self,
        config: UserSettings | None = None,
        client: GatewayClient | None = None,
        template_renderer: TemplateRenderer | None = None,
        context_builder: PageContextBuilder | None = None,
    ) -> None:
        """Initialize the viewer.

        Args:
            config: Viewer configuration (default: ``UserSettings.load()``)
            client: Optional custom gateway client
            template_renderer: Optional custom template renderer
            context_builder: Optional custom context builder
        """
        self.config = config or UserSettings.load()
        self.settings = ApplicationSettings(self.config)

        self.client = client or GatewayClient(self.config)
        self.template_renderer = template_renderer or TemplateRenderer(
            user_settings=self.config
        )
        self.context_builder = context_builder or PageContextBuilder(self.config)

        default = Coordinate(lat=self.config.default_lat, lon=self.config.default_lon)
        self.state = ViewerState(
            search_text=self.config.default_location,
            coordinate=default,
            pending=default,
            language=self.config.language,
        )

    # ---- input editing ----
    def set_search_text(self, text: str) -> None:
        self.state = self.state.evolve(search_text=text)

    def stage_coordinates(self, lat: float, lon: float) -> None:
        """Stage a coordinate pair without fetching."""
        self.state = self.state.evolve(pending=Coordinate(lat=lat, lon=lon))

    def toggle_language(self) -> None:
        self.state = self.state.evolve(language=self.state.language.toggled())

    # ---- fetching ----
    def mount(self) -> None:
        """Initial load: fetch the forecast for the starting coordinate."""
        self.fetch_weather(self.state.coordinate)

    def fetch_weather(self, coord: Coordinate) -> None:
        """Fetch the forecast for ``coord``; failures empty the display."""
        self.state = self.state.evolve(loading=True)
        try:
            entries = tuple(self.client.get_weather(coord))
        except GatewayError as err:
            logger.warning("Forecast fetch failed: %s", err.message)
            entries = ()
        self.state = self.state.evolve(entries=entries, loading=False)

    def fetch_by_place(self) -> None:
        """Resolve the search text, then fetch its forecast.

        A failed lookup stops loading and leaves the previous entries
        in place.
        """
        self.state = self.state.evolve(loading=True)
        try:
            coord = self.client.get_coordinates(self.state.search_text)
        except GatewayError as err:
            logger.info("Place lookup for %r failed: %s", self.state.search_text, err.message)
            self.state = self.state.evolve(loading=False)
            return

        self.state = self.state.evolve(coordinate=coord)
        self.fetch_weather(coord)

    def fetch_by_coordinates(self) -> None:
        """Promote the staged coordinate and fetch its forecast."""
        coord = self.state.pending
        self.state = self.state.evolve(coordinate=coord)
        self.fetch_weather(coord)

    # ---- output ----
    def render(self) -> str:
        """Render the current state as an HTML page."""
        ctx = self.context_builder.build_page_context(self.state)
        return self.template_renderer.render_page(**ctx)

    def write_page(self, output_path: Path | None = None) -> Path:
        """Render the page to disk and return where it was written."""
        path = output_path or self.settings.paths.preview_file
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(), encoding="utf-8")
        return path

    def open_documentation(self) -> str:
        """Open the gateway's interactive API docs in a new browser tab."""
        url = self.config.docs_url
        try:
            webbrowser.open_new_tab(url)
        except webbrowser.Error as exc:
            logger.debug("Could not open browser: %s", exc)
        return url
