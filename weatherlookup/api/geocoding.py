from __future__ import annotations

import logging

import requests

from weatherlookup.api.errors import LocationNotFoundError, WeatherNetworkError
from weatherlookup.api.http import http_get_json
from weatherlookup.api.models import ResolvedPlace
from weatherlookup.api.weather_utils import as_float
from weatherlookup.config import (
    DEFAULT_CITY,
    DEFAULT_COUNTRY,
    DEFAULT_LAT,
    DEFAULT_LON,
    GEOCODING_URL,
)

logger = logging.getLogger("weatherlookup")

DEFAULT_PLACE = ResolvedPlace(
    name=DEFAULT_CITY,
    country=DEFAULT_COUNTRY,
    latitude=DEFAULT_LAT,
    longitude=DEFAULT_LON,
)

NOT_FOUND_MESSAGE = "Location not found. Please try a different city name."
GEOCODE_NETWORK_MESSAGE = "Failed to geocode location due to network error."


def is_default_city(name: str) -> bool:
    return name.strip().lower() == DEFAULT_CITY.lower()


def fetch_geocoding(name: str) -> dict:
    """Hakee Open-Meteon geokoodauksesta yhden osuman raakana."""
    params = {"name": name, "count": 1, "language": "en"}
    return http_get_json(GEOCODING_URL, params=params)


def resolve_location(name: str) -> ResolvedPlace:
    """
    Paikannimi → ResolvedPlace.

    Oletuskaupunki palautetaan kovakoodatuilla koordinaateilla ilman verkkokutsua,
    jotta ensimmäinen näkymä ei riipu geokoodauspalvelusta.
    """
    if is_default_city(name):
        return DEFAULT_PLACE

    try:
        data = fetch_geocoding(name.strip())
    except (requests.RequestException, ValueError) as e:
        raise WeatherNetworkError(GEOCODE_NETWORK_MESSAGE) from e

    results = data.get("results") if isinstance(data, dict) else None
    if not isinstance(results, list) or not results or not isinstance(results[0], dict):
        logger.info("Geocoding: no match for %r", name)
        raise LocationNotFoundError(NOT_FOUND_MESSAGE)

    first = results[0]
    lat = as_float(first.get("latitude"))
    lon = as_float(first.get("longitude"))
    if lat is None or lon is None:
        raise LocationNotFoundError(NOT_FOUND_MESSAGE)

    place = ResolvedPlace(
        name=str(first.get("name") or name.strip()),
        country=first.get("country"),
        latitude=lat,
        longitude=lon,
    )
    logger.info("Geocoding: %r -> %s (%s, %s)", name, place.name, lat, lon)
    return place
