"""Application settings management.

This package provides:
- UserSettings: User-configurable settings loaded from config.yaml or the environment
- ApplicationSettings: Internal application settings and defaults
"""

from metforecast.settings.application import AppPaths, ApplicationSettings
from metforecast.settings.user import UserSettings

__all__ = ["AppPaths", "ApplicationSettings", "UserSettings"]
