from __future__ import annotations


class WeatherLookupError(RuntimeError):
    """Base class for lookup failures; str(exc) is shown to the user as-is."""


class LocationNotFoundError(WeatherLookupError):
    """Geocoding returned no match for the searched name."""


class WeatherNetworkError(WeatherLookupError):
    """Transport failure or non-success HTTP status on either Open-Meteo call."""


class WeatherDataUnavailableError(WeatherLookupError):
    """Forecast response is missing the current_weather block."""
