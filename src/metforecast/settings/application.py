"""Internal application settings derived from user settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from metforecast.constants import PREVIEW_DIR, PREVIEW_HTML_NAME
from metforecast.settings.user import UserSettings


@dataclass
class AppPaths:
    """Application file and directory paths.

    Templates ship inside the package; the preview directory is where the
    viewer writes its rendered page.
    """

    templates_dir: Path
    preview_dir: Path
    preview_html: str = PREVIEW_HTML_NAME

    @classmethod
    def from_base_dir(cls, base_dir: Path) -> AppPaths:
        """Create paths from base directory."""
        return cls(
            templates_dir=Path(__file__).parents[1] / "templates",
            preview_dir=base_dir / PREVIEW_DIR,
        )

    @property
    def preview_file(self) -> Path:
        return self.preview_dir / self.preview_html


class ApplicationSettings:
    """Application settings container.

    Combines user-provided configuration with application defaults.

    Examples:
        user_settings = UserSettings.load()
        app_settings = ApplicationSettings(user_settings)
        template_path = app_settings.paths.templates_dir
    """

    def __init__(
        self,
        user_settings: UserSettings,
        paths: AppPaths | None = None,
    ):
        """Initialize application settings with configuration sources."""
        self.user = user_settings
        self.paths = paths or AppPaths.from_base_dir(Path.cwd())
