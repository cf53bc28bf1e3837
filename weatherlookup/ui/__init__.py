"""Expose card render functions."""

from .card_weather import card_weather_lookup

__all__ = [
    "card_weather_lookup",
]
