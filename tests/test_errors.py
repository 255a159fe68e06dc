import logging

import pytest
from metforecast.gateway.app import upstream_log_level
from metforecast.weather.errors import (
    AuthenticationError,
    LocationNotFoundError,
    NetworkError,
    ParseError,
    RateLimitError,
    UpstreamError,
)


def test_str_includes_status_when_known() -> None:
    assert str(UpstreamError("Service unavailable", 503)) == "[503] Service unavailable"
    assert str(UpstreamError("boom")) == "boom"


@pytest.mark.parametrize(
    "code, expected_type",
    [
        (401, AuthenticationError),
        (403, AuthenticationError),
        (429, RateLimitError),
        (400, UpstreamError),
        (503, UpstreamError),
    ],
)
def test_from_status_creates_expected_error(
    code: int, expected_type: type[UpstreamError]
) -> None:
    err = UpstreamError.from_status(code, "test error")
    assert type(err) is expected_type
    assert err.status_code == code
    assert err.message == "test error"


def test_network_error_wraps_exception() -> None:
    original = ConnectionError("BOOM")
    err = NetworkError("Connection error", original)
    assert err.status_code == 0
    assert err.original_error is original
    assert err.provider_unavailable is True


def test_parse_error_wraps_exception() -> None:
    original = ValueError("bad parse")
    err = ParseError("Parse error", original)
    assert isinstance(err, UpstreamError)
    assert err.original_error is original
    assert err.provider_unavailable is False


def test_location_not_found_is_an_upstream_error() -> None:
    err = LocationNotFoundError("Atlantis")
    assert isinstance(err, UpstreamError)
    assert err.location == "Atlantis"
    assert "Atlantis" in err.message


@pytest.mark.parametrize(
    "err, level",
    [
        (LocationNotFoundError("Atlantis"), logging.INFO),
        (NetworkError("refused"), logging.WARNING),
        (UpstreamError("Service unavailable", 503), logging.WARNING),
        (RateLimitError("slow down", 429), logging.WARNING),
        (AuthenticationError("invalid API key", 401), logging.ERROR),
        (UpstreamError("Bad request", 400), logging.ERROR),
        (ParseError("Malformed forecast response"), logging.ERROR),
    ],
)
def test_log_level_follows_failure_kind(err: UpstreamError, level: int) -> None:
    assert upstream_log_level(err) == level
