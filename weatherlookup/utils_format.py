# weatherlookup/utils_format.py
"""Formatting helpers for the weather card (temperatures, weekdays, humidity)."""

from __future__ import annotations

import math
from datetime import date, datetime, tzinfo
from typing import Any

from weatherlookup.api.weather_utils import as_float

NO_DATA = "--"

_WEEKDAYS_SHORT = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS_SHORT = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def round_half_up(value: float) -> int:
    """Pyöristys .5 ylöspäin (round() pyöristää parilliseen)."""
    return int(math.floor(value + 0.5))


def format_temp(value: Any) -> str:
    """21.6 → '22°C', puuttuva / NaN → '--'."""
    temp = as_float(value)
    if temp is None:
        return NO_DATA
    return f"{round_half_up(temp)}°C"


def format_humidity(value: Any) -> str:
    humidity = as_float(value)
    if humidity is None:
        return NO_DATA
    return f"{humidity:g}%"


def format_wind(value: Any, unit: str = "km/h") -> str:
    speed = as_float(value)
    if speed is None:
        return NO_DATA
    return f"{speed:g} {unit}"


def day_name(epoch_seconds: int, tz: tzinfo | None = None) -> str:
    """Epoch-sekunnit → lyhyt englanninkielinen viikonpäivä ('Mon')."""
    dt = datetime.fromtimestamp(epoch_seconds, tz=tz)
    return _WEEKDAYS_SHORT[dt.weekday()]


def format_short_date(day: date) -> str:
    """date(2025, 11, 3) → 'Nov 3'."""
    return f"{_MONTHS_SHORT[day.month - 1]} {day.day}"
