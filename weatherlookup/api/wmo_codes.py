from __future__ import annotations

from enum import Enum
from typing import Any, Final

from weatherlookup.api.weather_utils import as_int


class IconKey(str, Enum):
    """Suljettu joukko ikoniavaimia; SVG-data on weather_icons-moduulin taulukossa."""

    SUN = "sun"
    CLOUD = "cloud"
    FOG = "fog"
    CLOUD_RAIN = "cloud-rain"
    CLOUD_SNOW = "cloud-snow"
    CLOUD_LIGHTNING = "cloud-lightning"
    THERMOMETER_SUN = "thermometer-sun"


UNKNOWN_DESCRIPTION: Final[str] = "Unknown"
FALLBACK_ICON: Final[IconKey] = IconKey.THERMOMETER_SUN

# (alku, loppu) mukaan lukien → (kuvaus, ikoni)
_WMO_RANGES: Final[tuple[tuple[int, int, str, IconKey], ...]] = (
    (0, 0, "Clear sky", IconKey.SUN),
    (1, 1, "Mainly clear", IconKey.CLOUD),
    (2, 2, "Partly cloudy", IconKey.CLOUD),
    (3, 3, "Overcast", IconKey.CLOUD),
    (45, 45, "Fog", IconKey.FOG),
    (48, 48, "Fog", IconKey.FOG),
    (51, 57, "Drizzle", IconKey.CLOUD_RAIN),
    (61, 67, "Rain", IconKey.CLOUD_RAIN),
    (71, 77, "Snow", IconKey.CLOUD_SNOW),
    (80, 82, "Showers", IconKey.CLOUD_RAIN),
    (95, 99, "Thunderstorm", IconKey.CLOUD_LIGHTNING),
)


def _classify(code: Any) -> tuple[str, IconKey]:
    c = as_int(code)
    if c is None:
        return UNKNOWN_DESCRIPTION, FALLBACK_ICON

    for lo, hi, description, icon in _WMO_RANGES:
        if lo <= c <= hi:
            return description, icon

    return UNKNOWN_DESCRIPTION, FALLBACK_ICON


def describe_weather_code(code: Any) -> str:
    """WMO-koodi → ihmisluettava kuvaus ('Unknown' kaikelle muulle)."""
    return _classify(code)[0]


def weather_code_to_icon(code: Any) -> IconKey:
    """WMO-koodi → ikoniavain (THERMOMETER_SUN kaikelle muulle)."""
    return _classify(code)[1]
