from __future__ import annotations

import requests

from weatherlookup.api.errors import WeatherDataUnavailableError, WeatherNetworkError
from weatherlookup.api.http import http_get_json
from weatherlookup.api.models import RawWeather
from weatherlookup.config import FORECAST_URL

WEATHER_NETWORK_MESSAGE = "Failed to fetch weather data."
NO_CURRENT_MESSAGE = "Current weather data not available."

DAILY_FIELDS = ("temperature_2m_max", "temperature_2m_min", "weathercode")
HOURLY_FIELDS = ("relativehumidity_2m",)


def fetch_forecast(lat: float, lon: float) -> dict:
    """Hakee Open-Meteosta nykysään, päiväennusteen ja tuntikosteuden yhdellä kutsulla."""
    params = {
        "latitude": lat,
        "longitude": lon,
        "current_weather": "true",
        "daily": ",".join(DAILY_FIELDS),
        "hourly": ",".join(HOURLY_FIELDS),
        "timezone": "auto",
    }
    return http_get_json(FORECAST_URL, params=params)


def fetch_weather(lat: float, lon: float) -> RawWeather:
    """
    Palauttaa forecast-vastauksen lohkot.

    WeatherNetworkError: kuljetusvirhe tai ei-2xx-status
    WeatherDataUnavailableError: current_weather puuttuu
    """
    try:
        data = fetch_forecast(lat, lon)
    except (requests.RequestException, ValueError) as e:
        raise WeatherNetworkError(WEATHER_NETWORK_MESSAGE) from e

    if not isinstance(data, dict):
        raise WeatherDataUnavailableError(NO_CURRENT_MESSAGE)

    current = data.get("current_weather")
    if not current or not isinstance(current, dict):
        raise WeatherDataUnavailableError(NO_CURRENT_MESSAGE)

    daily = data.get("daily") or {}
    hourly = data.get("hourly") or {}

    return RawWeather(
        current=current,
        daily=daily if isinstance(daily, dict) else {},
        hourly=hourly if isinstance(hourly, dict) else {},
    )
