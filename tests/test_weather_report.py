# tests/test_weather_report.py
from __future__ import annotations

from datetime import timezone

import weatherlookup.api.weather as weather
from weatherlookup.api.models import RawWeather, ResolvedPlace

PLACE = ResolvedPlace(name="Paris", country="France", latitude=48.85, longitude=2.35)


def _daily(n: int = 6) -> dict:
    days = [f"2024-01-{d:02d}" for d in range(1, n + 1)]
    return {
        "time": days,
        "temperature_2m_max": [10.0 + i for i in range(n)],
        "temperature_2m_min": [1.0 + i for i in range(n)],
        "weathercode": [0, 1, 61, 71, 95, 3, 2, 45][:n],
    }


def test_build_forecast_days_skips_today_and_takes_five():
    daily = _daily(6)
    out = weather.build_forecast_days(daily, tz=timezone.utc)

    assert len(out) == 5
    # ensimmäinen on alkuperäinen indeksi 1
    assert out[0].temperature_max == 11.0
    assert out[0].condition_text == "Mainly clear"
    assert [d.temperature_max for d in out] == [11.0, 12.0, 13.0, 14.0, 15.0]
    assert out[0].epoch_seconds == 1704153600  # 2024-01-02 00:00 UTC
    epochs = [d.epoch_seconds for d in out]
    assert epochs == sorted(epochs)


def test_build_forecast_days_caps_at_five_for_longer_series():
    out = weather.build_forecast_days(_daily(8), tz=timezone.utc)
    assert len(out) == 5
    assert out[-1].weather_code == 3


def test_build_forecast_days_short_series():
    assert weather.build_forecast_days(_daily(3), tz=timezone.utc)[-1].weather_code == 61
    assert weather.build_forecast_days({"time": ["2024-01-01"]}) == []
    assert weather.build_forecast_days({}) == []


def test_build_forecast_days_temperature_fallbacks():
    daily = {
        "time": ["2024-01-01", "2024-01-02", "2024-01-03"],
        "temperature_2m_max": [5.0, None, None],
        "temperature_2m_min": [1.0, -3.0, None],
        "weathercode": [0, 3],
    }
    out = weather.build_forecast_days(daily, tz=timezone.utc)

    assert out[0].temperature == -3.0  # max puuttuu → min
    assert out[0].temperature_max is None
    assert out[1].temperature is None  # molemmat puuttuvat
    # koodilista lyhyempi → None → Unknown
    assert out[1].weather_code is None
    assert out[1].condition_text == "Unknown"


def test_build_forecast_days_skips_bad_dates():
    daily = {"time": ["2024-01-01", "garbage", "2024-01-03"], "temperature_2m_max": [1, 2, 3]}
    out = weather.build_forecast_days(daily, tz=timezone.utc)
    assert len(out) == 1
    assert out[0].temperature == 3.0


def test_build_current_conditions_uses_hour_fallback_for_humidity():
    raw = RawWeather(
        current={"temperature": 21.4, "windspeed": 9.7, "weathercode": 2, "time": "2024-01-01T10:15"},
        hourly={
            "time": ["2024-01-01T09:00", "2024-01-01T10:00"],
            "relativehumidity_2m": [80, 72],
        },
    )
    cur = weather.build_current_conditions(PLACE, raw)

    assert cur.temperature == 21.4
    assert cur.apparent_temperature == 21.4
    assert cur.humidity_percent == 72.0
    assert cur.wind_speed == 9.7
    assert cur.weather_code == 2
    assert cur.condition_text == "Partly cloudy"
    assert cur.place is PLACE


def test_build_current_conditions_without_hourly():
    raw = RawWeather(current={"temperature": 1, "windspeed": 2, "weathercode": 0, "time": "2024-01-01T10:00"})
    cur = weather.build_current_conditions(PLACE, raw)
    assert cur.humidity_percent is None


def test_get_weather_for_location_chains_stages(monkeypatch):
    calls = []

    def fake_resolve(name):
        calls.append(("resolve", name))
        return PLACE

    def fake_fetch(lat, lon):
        calls.append(("fetch", lat, lon))
        return RawWeather(
            current={"temperature": 5, "windspeed": 1, "weathercode": 61, "time": "2024-01-01T10:00"},
            daily=_daily(6),
        )

    monkeypatch.setattr(weather, "resolve_location", fake_resolve)
    monkeypatch.setattr(weather, "fetch_weather", fake_fetch)

    report = weather.get_weather_for_location("paris")

    assert calls == [("resolve", "paris"), ("fetch", 48.85, 2.35)]
    assert report.place is PLACE
    assert report.current.condition_text == "Rain"
    assert len(report.forecast) == 5
