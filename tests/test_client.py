from typing import Any, Callable
from unittest.mock import Mock, patch

import pytest
import requests

from metforecast.settings.user import UserSettings
from metforecast.viewer.client import GatewayClient, GatewayError
from metforecast.weather.models import Coordinate


@pytest.fixture
def gateway(settings: UserSettings) -> GatewayClient:
    return GatewayClient(settings)


def test_get_weather_sends_exact_coordinates(
    gateway: GatewayClient,
    timeseries: list[dict[str, Any]],
    json_response: Callable[..., Mock],
) -> None:
    with patch("metforecast.viewer.client.requests.get") as mock_get:
        mock_get.return_value = json_response(timeseries[11:12])

        entries = gateway.get_weather(Coordinate(lat=40.7128, lon=-74.006))

    assert len(entries) == 1
    assert entries[0].details.air_temperature == 10.5
    args, kwargs = mock_get.call_args
    assert args[0] == "http://gateway.test/api/weather"
    assert kwargs["params"] == {"lat": 40.7128, "lon": -74.006}


def test_query_string_contains_staged_values(
    gateway: GatewayClient, json_response: Callable[..., Mock]
) -> None:
    with patch("metforecast.viewer.client.requests.get") as mock_get:
        mock_get.return_value = json_response([])

        gateway.get_weather(Coordinate(lat=40.7128, lon=-74.006))

    args, kwargs = mock_get.call_args
    prepared = requests.Request("GET", args[0], params=kwargs["params"]).prepare()
    assert prepared.url is not None
    assert "lat=40.7128&lon=-74.006" in prepared.url


def test_get_coordinates(gateway: GatewayClient, json_response: Callable[..., Mock]) -> None:
    with patch("metforecast.viewer.client.requests.get") as mock_get:
        mock_get.return_value = json_response({"lat": 40.71, "lng": -74.0})

        coord = gateway.get_coordinates("New York")

    assert coord == Coordinate(lat=40.71, lon=-74.0)
    assert mock_get.call_args.kwargs["params"] == {"location": "New York"}


def test_error_status_raises(gateway: GatewayClient, json_response: Callable[..., Mock]) -> None:
    with patch("metforecast.viewer.client.requests.get") as mock_get:
        mock_get.return_value = json_response({"error": "boom"}, status_code=500)

        with pytest.raises(GatewayError) as excinfo:
            gateway.get_coordinates("Atlantis")

    assert excinfo.value.status_code == 500
    assert "boom" in excinfo.value.message


def test_transport_failure_raises(gateway: GatewayClient) -> None:
    with patch("metforecast.viewer.client.requests.get") as mock_get:
        mock_get.side_effect = requests.ConnectionError("refused")

        with pytest.raises(GatewayError):
            gateway.get_weather(Coordinate.default())


@pytest.mark.parametrize("body", [{"error": "x"}, [{"data": {}}]])
def test_unexpected_body_raises(
    gateway: GatewayClient, json_response: Callable[..., Mock], body: Any
) -> None:
    with patch("metforecast.viewer.client.requests.get") as mock_get:
        mock_get.return_value = json_response(body)

        with pytest.raises(GatewayError):
            gateway.get_weather(Coordinate.default())


def test_null_reading_keeps_every_entry(
    gateway: GatewayClient, json_response: Callable[..., Mock]
) -> None:
    body = [
        {"time": "2024-05-01T11:00:00Z", "data": {"instant": {"details": {"air_temperature": 5}}}},
        {"time": "2024-05-02T11:00:00Z", "data": {"instant": {"details": None}}},
        {"time": "2024-05-03T11:00:00Z", "data": None},
    ]
    with patch("metforecast.viewer.client.requests.get") as mock_get:
        mock_get.return_value = json_response(body)

        entries = gateway.get_weather(Coordinate.default())

    assert len(entries) == 3
    assert entries[0].details.air_temperature == 5
    assert entries[1].details.air_temperature is None
    assert entries[2].details.wind_speed is None
