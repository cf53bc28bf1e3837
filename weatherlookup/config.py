# config.py
"""Configuration settings for the weather lookup application."""

import os

HTTP_TIMEOUT_S: float = 8.0

DEV: bool = os.environ.get("DEV", "0") == "1"

USER_AGENT: str = "WeatherLookup/1.0"
"""User-Agent header sent with every Open-Meteo request."""

# ------------------- OPEN-METEO ENDPOINTS -------------------

GEOCODING_URL: str = "https://geocoding-api.open-meteo.com/v1/search"
"""Place name → coordinates search endpoint."""

FORECAST_URL: str = "https://api.open-meteo.com/v1/forecast"
"""Current weather + daily/hourly forecast endpoint."""

# ------------------- DEFAULT LOCATION -------------------

DEFAULT_CITY: str = "New Delhi"
DEFAULT_COUNTRY: str = "India"

DEFAULT_LAT: float = 28.65195
DEFAULT_LON: float = 77.22896
"""New Delhi coordinates, used without geocoding for the first render."""

# ------------------- FORECAST -------------------

FORECAST_DAYS: int = 5
"""Number of upcoming days in the forecast strip (today excluded)."""

HOUR_PREFIX_LEN: int = 13
"""Length of the 'YYYY-MM-DDTHH' prefix used for the humidity fallback match."""
