from datetime import UTC, datetime
from pathlib import Path

import pytest

from metforecast.constants import Language
from metforecast.settings import ApplicationSettings
from metforecast.settings.user import UserSettings

GOOD_YAML = """
port: 8080
user_agent: "metforecast-tests/1.0 ops@example.com"
geocoder_api_key: "${OPENCAGE_API_KEY}"
gateway_url: "http://localhost:8080/"
language: ru
"""

BAD_YAML = """
port: not-a-port
"""


def test_defaults_match_reference_location() -> None:
    cfg = UserSettings()
    assert (cfg.default_lat, cfg.default_lon) == (55.7558, 37.6176)
    assert cfg.default_location == "Moscow"
    assert cfg.port == 3000
    assert cfg.geocoder_api_key == ""


def test_load_yaml_with_env_interpolation(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("OPENCAGE_API_KEY", "injected-key")
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(GOOD_YAML)

    cfg = UserSettings.load(cfg_file)

    assert cfg.port == 8080
    assert cfg.geocoder_api_key == "injected-key"
    assert cfg.gateway_url == "http://localhost:8080"
    assert cfg.language is Language.RU
    assert cfg.docs_url == "http://localhost:8080/api-docs"


def test_invalid_config(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yaml"
    cfg_file.write_text(BAD_YAML)
    with pytest.raises(RuntimeError):
        UserSettings.load(cfg_file)


def test_unknown_timezone_rejected() -> None:
    with pytest.raises(ValueError):
        UserSettings(timezone="Mars/Olympus_Mons")


def test_load_falls_back_to_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("METFORECAST_CONFIG", raising=False)
    monkeypatch.setattr(UserSettings, "DEFAULT_CONFIG_PATHS", [tmp_path / "missing.yaml"])
    monkeypatch.setenv("PORT", "4000")
    monkeypatch.setenv("OPENCAGE_API_KEY", "env-key")

    cfg = UserSettings.load()

    assert cfg.port == 4000
    assert cfg.geocoder_api_key == "env-key"


def test_load_from_config_env_var(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg_file = tmp_path / "custom.yaml"
    cfg_file.write_text("port: 5050\n")
    monkeypatch.setenv("METFORECAST_CONFIG", str(cfg_file))

    assert UserSettings.load().port == 5050


def test_missing_config_env_var_target(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("METFORECAST_CONFIG", str(tmp_path / "nope.yaml"))
    with pytest.raises(FileNotFoundError):
        UserSettings.load()


def test_invalid_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(RuntimeError):
        UserSettings.from_env()


def test_format_time_uses_display_timezone() -> None:
    cfg = UserSettings(timezone="Europe/Moscow", time_format="%H:%M")
    assert cfg.format_time(datetime(2024, 5, 1, 11, 0, tzinfo=UTC)) == "14:00"
    assert cfg.format_time(datetime(2024, 5, 1, 11, 0)) == "14:00"


def test_application_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    app_settings = ApplicationSettings(UserSettings())
    assert (app_settings.paths.templates_dir / "viewer.html.j2").is_file()
    expected = tmp_path.resolve() / "preview" / "forecast-preview.html"
    assert app_settings.paths.preview_file == expected
