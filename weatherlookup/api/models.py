from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ResolvedPlace:
    """Paikka, jolle sää haetaan (preset tai geokoodauksen ensimmäinen osuma)."""

    name: str
    country: str | None
    latitude: float
    longitude: float


@dataclass
class RawWeather:
    """Forecast-vastauksen kolme lohkoa sellaisenaan."""

    current: dict[str, Any]
    daily: dict[str, Any] = field(default_factory=dict)
    hourly: dict[str, Any] = field(default_factory=dict)


@dataclass
class CurrentConditions:
    temperature: float | None
    apparent_temperature: float | None
    condition_text: str
    humidity_percent: float | None  # None = ei tuntidataa samalle tunnille
    wind_speed: float | None
    weather_code: int | None
    observed_at: str | None
    place: ResolvedPlace


@dataclass
class ForecastDay:
    epoch_seconds: int
    temperature: float | None  # max, tai min jos max puuttuu, tai None
    temperature_max: float | None
    temperature_min: float | None
    condition_text: str
    weather_code: int | None


@dataclass
class WeatherReport:
    """Yhden onnistuneen haun tulos."""

    place: ResolvedPlace
    current: CurrentConditions
    forecast: list[ForecastDay]
