"""Bundled string tables for the viewer's two display languages."""

from __future__ import annotations

from typing import Final

from metforecast.constants import Language

STRINGS: Final[dict[Language, dict[str, str]]] = {
    Language.EN: {
        "title": "Weather Forecast",
        "language": "EN",
        "documentation": "Documentation",
        "location_placeholder": "Enter location",
        "latitude_placeholder": "Enter latitude",
        "longitude_placeholder": "Enter longitude",
        "fetch": "Fetch Weather",
        "loading": "Loading...",
        "no_data": "No weather data available",
        "date": "Date",
        "temperature": "Temperature",
        "pressure": "Air Pressure",
        "humidity": "Humidity",
        "wind_speed": "Wind Speed",
        "wind_direction": "Wind Direction",
        "cloudiness": "Cloudiness",
        "symbol": "Weather Symbol",
    },
    Language.RU: {
        "title": "Прогноз погоды",
        "language": "RU",
        "documentation": "Документация",
        "location_placeholder": "Введите местоположение",
        "latitude_placeholder": "Введите широту",
        "longitude_placeholder": "Введите долготу",
        "fetch": "Получить прогноз",
        "loading": "Загрузка...",
        "no_data": "Нет данных о погоде",
        "date": "Дата",
        "temperature": "Температура",
        "pressure": "Давление",
        "humidity": "Влажность",
        "wind_speed": "Скорость ветра",
        "wind_direction": "Направление ветра",
        "cloudiness": "Облачность",
        "symbol": "Символ погоды",
    },
}


def strings_for(language: Language) -> dict[str, str]:
    """Return the string table for ``language``."""
    return STRINGS[language]
