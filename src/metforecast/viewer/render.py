"""Page rendering components for the forecast viewer."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, cast

from jinja2 import Environment, FileSystemLoader, Template, select_autoescape

from metforecast.settings import ApplicationSettings, UserSettings
from metforecast.viewer.state import ViewerState
from metforecast.viewer.strings import strings_for
from metforecast.weather.models import ForecastEntry


def blank(value: Any) -> Any:
    """Render missing readings as an empty string instead of ``None``."""
    return "" if value is None else value


class TemplateRenderer:
    """Handles the Jinja2 template environment and page rendering.

    The renderer uses the packaged templates by default but can be pointed
    at a custom template directory.
    """

    page_template: Template

    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        user_settings: Optional[UserSettings] = None,
    ) -> None:
        """Initialize the template renderer.

        Args:
            templates_dir: Directory containing templates (default: from settings)
            user_settings: User configuration
        """
        self.user_settings = user_settings or UserSettings.load()
        self.app_settings = ApplicationSettings(self.user_settings)
        self.templates_dir = templates_dir or self.app_settings.paths.templates_dir

        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=select_autoescape(["html", "j2"]),
        )
        self.env.filters.update(
            {
                "blank": blank,
                "local_time": self.user_settings.format_time,
            }
        )

        self.page_template = self.env.get_template("viewer.html.j2")

    def render_page(self, **context: Any) -> str:
        """Render the viewer page with the provided context."""
        return cast(str, self.page_template.render(**context))


class PageContextBuilder:
    """Builds template context from a viewer state snapshot."""

    def __init__(self, user_settings: Optional[UserSettings] = None) -> None:
        self.user_settings = user_settings or UserSettings.load()

    def card(self, entry: ForecastEntry) -> Dict[str, Any]:
        """Flatten one entry into the values a card shows."""
        details = entry.details
        return {
            "time": entry.time,
            "air_temperature": details.air_temperature,
            "air_pressure_at_sea_level": details.air_pressure_at_sea_level,
            "relative_humidity": details.relative_humidity,
            "wind_speed": details.wind_speed,
            "wind_from_direction": details.wind_from_direction,
            "cloud_area_fraction": details.cloud_area_fraction,
            "symbol_code": entry.symbol_code,
        }

    def build_page_context(self, state: ViewerState) -> Dict[str, Any]:
        """Build complete context for the viewer template.

        Args:
            state: Current viewer snapshot

        Returns:
            Template context dictionary
        """
        return {
            "t": strings_for(state.language),
            "lang": state.language.value,
            "search_text": state.search_text,
            "pending": state.pending,
            "loading": state.loading,
            "has_data": state.has_data,
            "cards": [self.card(entry) for entry in state.entries],
            "docs_url": self.user_settings.docs_url,
        }
