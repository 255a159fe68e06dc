import json
from pathlib import Path
from typing import Any, Callable
from unittest.mock import Mock

import pytest

from metforecast.settings.user import UserSettings

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def forecast_body() -> dict[str, Any]:
    return json.loads((DATA_DIR / "locationforecast_sample.json").read_text())


@pytest.fixture
def timeseries(forecast_body: dict[str, Any]) -> list[dict[str, Any]]:
    return forecast_body["properties"]["timeseries"]


@pytest.fixture
def geocode_body() -> dict[str, Any]:
    return json.loads((DATA_DIR / "geocode_moscow.json").read_text())


@pytest.fixture
def settings() -> UserSettings:
    return UserSettings(
        port=3000,
        user_agent="metforecast-tests/1.0",
        geocoder_api_key="test-geocoder-key",
        gateway_url="http://gateway.test",
        timezone="Europe/Moscow",
        time_format="%d.%m.%Y, %H:%M:%S",
    )


def _json_response(body: Any, status_code: int = 200) -> Mock:
    resp = Mock()
    resp.status_code = status_code
    resp.text = json.dumps(body)
    resp.json.return_value = body
    return resp


@pytest.fixture
def json_response() -> Callable[..., Mock]:
    """Factory for stand-ins of ``requests.Response`` carrying a JSON body."""
    return _json_response
