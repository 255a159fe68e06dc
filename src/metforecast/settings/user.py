"""User-configurable settings loaded from config.yaml or the environment."""

from __future__ import annotations

import os
import re
from datetime import datetime
from pathlib import Path
from typing import Any, ClassVar
from zoneinfo import ZoneInfo

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from metforecast.constants import (
    DEFAULT_LAT,
    DEFAULT_LOCATION,
    DEFAULT_LON,
    DOCS_PATH,
    Language,
)
from metforecast.utils.time import TimeUtils

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class UserSettings(BaseModel):
    """Settings shared by the forecast gateway and the viewer.

    Every field has a working default except the geocoder key, which must
    be injected (normally through ``${OPENCAGE_API_KEY}``) for place-name
    lookups to succeed.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/metforecast/config.yaml").expanduser(),
        Path("/etc/metforecast/config.yaml"),
    ]

    # Gateway settings
    host: str = Field("127.0.0.1", description="Interface the gateway binds to")
    port: int = Field(3000, gt=0, lt=65536, description="Port the gateway listens on")
    user_agent: str = Field(
        "metforecast/0.1 github.com/metforecast",
        min_length=1,
        description="User-Agent sent to met.no (required by their terms of service)",
    )
    geocoder_api_key: str = Field("", description="OpenCage geocoding API key")
    request_timeout: float = Field(
        10.0, gt=0, description="Timeout for upstream requests in seconds"
    )
    static_dir: Path | None = Field(
        None, description="Directory served for non-API paths (index.html fallback)"
    )

    # Location defaults
    default_lat: float = Field(DEFAULT_LAT, description="Latitude used when none is given")
    default_lon: float = Field(DEFAULT_LON, description="Longitude used when none is given")
    default_location: str = Field(DEFAULT_LOCATION, description="Initial place-name search text")

    # Viewer settings
    gateway_url: str = Field(
        "http://localhost:3000", description="Base URL the viewer calls"
    )
    language: Language = Language.EN
    timezone: str = Field(
        "Europe/Moscow", description="Timezone used to display forecast dates"
    )
    time_format: str = Field(
        "%d.%m.%Y, %H:%M:%S", description="Forecast date display format"
    )

    # ---- validators ----
    @field_validator("gateway_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except Exception as exc:
            raise ValueError(f"Unknown timezone: {v}") from exc
        return v

    # ---- convenience methods ----
    def get_timezone(self) -> ZoneInfo:
        """Get configured timezone as ZoneInfo object."""
        return ZoneInfo(self.timezone)

    def format_time(self, dt: datetime) -> str:
        """Format a datetime in the configured display timezone.

        Args:
            dt: Datetime to format (naive values are taken as UTC)

        Returns:
            Formatted time string
        """
        local = TimeUtils.to_timezone(dt, self.timezone)
        return TimeUtils.format_datetime(local, self.time_format)

    @property
    def docs_url(self) -> str:
        """Interactive API documentation on the configured gateway."""
        return f"{self.gateway_url}{DOCS_PATH}"

    @classmethod
    def from_env(cls) -> UserSettings:
        """Build settings from process environment variables only.

        Recognized variables: ``PORT``, ``OPENCAGE_API_KEY``,
        ``METFORECAST_USER_AGENT``, ``METFORECAST_GATEWAY_URL``.
        """
        env_map = {
            "port": "PORT",
            "geocoder_api_key": "OPENCAGE_API_KEY",
            "user_agent": "METFORECAST_USER_AGENT",
            "gateway_url": "METFORECAST_GATEWAY_URL",
        }
        data: dict[str, Any] = {
            field: os.environ[var] for field, var in env_map.items() if os.environ.get(var)
        }
        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid environment configuration:\n{err}") from err

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load configuration from a YAML file, falling back to the environment.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated UserSettings object

        Raises:
            FileNotFoundError: If METFORECAST_CONFIG points at a missing file
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            # Check environment variable first
            env_path = os.environ.get("METFORECAST_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(
                        f"Config file from METFORECAST_CONFIG not found: {path}"
                    )
            else:
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    return cls.from_env()

        import yaml  # local import to avoid hard dep for callers

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
