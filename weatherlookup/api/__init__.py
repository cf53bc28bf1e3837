# weatherlookup/api/__init__.py
from .errors import (
    LocationNotFoundError as LocationNotFoundError,
    WeatherDataUnavailableError as WeatherDataUnavailableError,
    WeatherLookupError as WeatherLookupError,
    WeatherNetworkError as WeatherNetworkError,
)
from .geocoding import resolve_location as resolve_location
from .weather import get_weather_for_location as get_weather_for_location
from .weather_fetch import fetch_weather as fetch_weather
from .wmo_codes import (
    IconKey as IconKey,
    describe_weather_code as describe_weather_code,
    weather_code_to_icon as weather_code_to_icon,
)
