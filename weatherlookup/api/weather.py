"""
Säähaun julkiset entrypointit.

Varsinainen logiikka on jaettu:
- geocoding -> paikannimi → koordinaatit
- weather_fetch -> Open-Meteo forecast -haku
- weather_utils -> tyypinmuunnokset, kosteuden tuntihaku, päivämäärät
- wmo_codes -> WMO-koodi → kuvaus / ikoni
"""

from __future__ import annotations

import logging
from datetime import tzinfo
from typing import Any

from weatherlookup.api.geocoding import resolve_location
from weatherlookup.api.models import (
    CurrentConditions,
    ForecastDay,
    RawWeather,
    ResolvedPlace,
    WeatherReport,
)
from weatherlookup.api.weather_fetch import fetch_weather
from weatherlookup.api.weather_utils import (
    as_float,
    as_int,
    iso_date_to_epoch,
    match_humidity,
    value_at,
)
from weatherlookup.api.wmo_codes import describe_weather_code
from weatherlookup.config import FORECAST_DAYS

logger = logging.getLogger("weatherlookup")


def build_current_conditions(place: ResolvedPlace, raw: RawWeather) -> CurrentConditions:
    """Poimii current_weather-lohkon kentät ja yhdistää tuntisarjasta kosteuden."""
    cw = raw.current
    temp = as_float(cw.get("temperature"))
    code = as_int(cw.get("weathercode"))
    observed_at = cw.get("time")

    humidity = match_humidity(
        observed_at,
        raw.hourly.get("time"),
        raw.hourly.get("relativehumidity_2m"),
    )

    return CurrentConditions(
        temperature=temp,
        # current_weather ei sisällä tuntuu-lämpötilaa
        apparent_temperature=temp,
        condition_text=describe_weather_code(code),
        humidity_percent=humidity,
        wind_speed=as_float(cw.get("windspeed")),
        weather_code=code,
        observed_at=observed_at if isinstance(observed_at, str) else None,
        place=place,
    )


def build_forecast_days(
    daily: dict[str, Any],
    days: int = FORECAST_DAYS,
    tz: tzinfo | None = None,
) -> list[ForecastDay]:
    """
    Rakentaa päiväennusteen: indeksistä 1 alkaen (tämä päivä ohitetaan),
    korkeintaan `days` kappaletta alkuperäisessä järjestyksessä.
    """
    times: list[Any] = daily.get("time") or []
    temp_max: list[Any] = daily.get("temperature_2m_max") or []
    temp_min: list[Any] = daily.get("temperature_2m_min") or []
    codes: list[Any] = daily.get("weathercode") or []

    forecast: list[ForecastDay] = []
    for i in range(1, len(times)):
        if len(forecast) >= days:
            break

        try:
            epoch = iso_date_to_epoch(str(times[i]), tz=tz)
        except ValueError:
            logger.warning("Skipping forecast day with bad date %r", times[i])
            continue

        hi = as_float(value_at(temp_max, i))
        lo = as_float(value_at(temp_min, i))
        code = as_int(value_at(codes, i))

        forecast.append(
            ForecastDay(
                epoch_seconds=epoch,
                temperature=hi if hi is not None else lo,
                temperature_max=hi,
                temperature_min=lo,
                condition_text=describe_weather_code(code),
                weather_code=code,
            )
        )

    return forecast


def build_weather_report(
    place: ResolvedPlace,
    raw: RawWeather,
    tz: tzinfo | None = None,
) -> WeatherReport:
    return WeatherReport(
        place=place,
        current=build_current_conditions(place, raw),
        forecast=build_forecast_days(raw.daily, tz=tz),
    )


def get_weather_for_location(name: str) -> WeatherReport:
    """
    Yksinkertainen “orkestroija”: resolve → fetch → kosteus → ennuste.

    Virheet (WeatherLookupError-alaluokat) nousevat kutsujalle.
    """
    place = resolve_location(name)
    raw = fetch_weather(place.latitude, place.longitude)
    report = build_weather_report(place, raw)
    logger.info(
        "Weather for %s: %s, %d forecast days",
        place.name,
        report.current.condition_text,
        len(report.forecast),
    )
    return report
