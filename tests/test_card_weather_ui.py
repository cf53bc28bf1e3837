from __future__ import annotations

import importlib
from contextlib import nullcontext

import pytest

from weatherlookup.api.errors import LocationNotFoundError
from weatherlookup.api.models import CurrentConditions, ForecastDay, ResolvedPlace, WeatherReport
from weatherlookup.viewmodels.weather_lookup import LookupState, WeatherLookupController

card_weather_module = importlib.import_module("weatherlookup.ui.card_weather")


class DummySt:
    """Kevyt stub streamlitille card_weather_lookup-testejä varten."""

    def __init__(self, submitted: bool = False, term: str | None = None):
        self.session_state: dict[str, object] = {}
        self.markdowns: list[str] = []
        self._submitted = submitted
        self._term = term
        self.button_labels: list[str] = []

    def form(self, *a, **k):
        return nullcontext()

    def spinner(self, *a, **k):
        return nullcontext()

    def text_input(self, label, key=None, **kwargs):
        if self._term is not None:
            self.session_state[key] = self._term
        return self.session_state.get(key, "")

    def form_submit_button(self, label, **kwargs):
        self.button_labels.append(label)
        return self._submitted

    def markdown(self, html, unsafe_allow_html=False):
        self.markdowns.append(html)


def _report(name: str = "New Delhi", country: str = "India") -> WeatherReport:
    place = ResolvedPlace(name=name, country=country, latitude=1.0, longitude=2.0)
    current = CurrentConditions(
        temperature=31.6,
        apparent_temperature=31.6,
        condition_text="Clear sky",
        humidity_percent=None,
        wind_speed=5.0,
        weather_code=0,
        observed_at="2024-05-01T12:00",
        place=place,
    )
    forecast = [
        ForecastDay(
            epoch_seconds=1714521600 + i * 86400,
            temperature=35.0,
            temperature_max=35.0,
            temperature_min=25.0,
            condition_text="Thunderstorm",
            weather_code=95,
        )
        for i in range(5)
    ]
    return WeatherReport(place=place, current=current, forecast=forecast)


def _install(monkeypatch, dummy_st, fetch):
    monkeypatch.setattr(card_weather_module, "st", dummy_st)
    dummy_st.session_state[card_weather_module.CONTROLLER_KEY] = WeatherLookupController(fetch=fetch)
    titles: list[str] = []
    monkeypatch.setattr(card_weather_module, "section_title", lambda html, **kw: titles.append(html))
    return titles


def test_card_weather_first_render_loads_default_city(monkeypatch):
    dummy_st = DummySt()
    calls: list[str] = []
    titles = _install(monkeypatch, dummy_st, lambda name: calls.append(name) or _report())

    rendered: dict[str, object] = {}

    def fake_html(html: str, height: int, scrolling: bool) -> None:
        rendered["html"] = html
        rendered["height"] = height
        rendered["scrolling"] = scrolling

    monkeypatch.setattr(card_weather_module, "st_html", fake_html)

    card_weather_module.card_weather_lookup()

    assert calls == ["New Delhi"]
    assert dummy_st.session_state[card_weather_module.SEARCH_KEY] == "New Delhi"
    assert dummy_st.button_labels == ["Search"]

    page = "".join(dummy_st.markdowns)
    assert "New Delhi, India" in page
    assert "32°C" in page
    assert "Feels Like" in page
    assert "Humidity" in page
    # kosteus puuttuu → "--"
    assert "<div class=\"wl-tile-value\">--</div>" in page
    assert "Open-Meteo" in page

    assert titles == ["5-Day Forecast"]
    forecast_html = str(rendered["html"])
    assert forecast_html.count('class="forecast-cell"') == 5
    assert 'data-icon="cloud-lightning"' in forecast_html
    assert "Thunderstorm" in forecast_html
    assert rendered["height"] == 150
    assert rendered["scrolling"] is False


def test_card_weather_submit_runs_new_lookup(monkeypatch):
    dummy_st = DummySt(submitted=True, term=" Paris ")
    calls: list[str] = []
    _install(monkeypatch, dummy_st, lambda name: calls.append(name) or _report("Paris", "France"))
    monkeypatch.setattr(card_weather_module, "st_html", lambda *a, **k: None)

    card_weather_module.card_weather_lookup()

    controller = dummy_st.session_state[card_weather_module.CONTROLLER_KEY]
    assert calls == ["Paris"]
    assert controller.location == "Paris"
    assert "Paris, France" in "".join(dummy_st.markdowns)


def test_card_weather_shows_error_panel(monkeypatch):
    dummy_st = DummySt(submitted=True, term="<b>Atlantis</b>")

    def fetch(name):
        raise LocationNotFoundError("Location not found for <b>" + name + "</b>")

    _install(monkeypatch, dummy_st, fetch)
    monkeypatch.setattr(
        card_weather_module,
        "st_html",
        lambda *a, **k: pytest.fail("st_html() ei pitäisi kutsua virhetilassa"),
    )

    card_weather_module.card_weather_lookup()

    controller = dummy_st.session_state[card_weather_module.CONTROLLER_KEY]
    assert controller.state is LookupState.FAILURE
    page = "".join(dummy_st.markdowns)
    assert "Error:" in page
    assert "&lt;b&gt;Atlantis&lt;/b&gt;" in page
    assert "<b>Atlantis</b>" not in page
    assert "Hint:" in page


def test_card_weather_creates_controller_once(monkeypatch):
    dummy_st = DummySt()
    monkeypatch.setattr(card_weather_module, "st", dummy_st)
    monkeypatch.setattr(card_weather_module, "section_title", lambda *a, **k: None)
    monkeypatch.setattr(card_weather_module, "st_html", lambda *a, **k: None)
    monkeypatch.setattr(
        "weatherlookup.viewmodels.weather_lookup.get_weather_for_location",
        lambda name: _report(),
    )

    card_weather_module.card_weather_lookup()
    first = dummy_st.session_state[card_weather_module.CONTROLLER_KEY]
    card_weather_module.card_weather_lookup()

    assert dummy_st.session_state[card_weather_module.CONTROLLER_KEY] is first
    assert first.generation == 1


def test_card_weather_shows_error_card_on_exception(monkeypatch):
    dummy_st = DummySt()
    monkeypatch.setattr(card_weather_module, "st", dummy_st)

    def boom():
        raise RuntimeError("oops")

    monkeypatch.setattr(card_weather_module, "_get_controller", boom)

    called_cards: list[tuple[str, str]] = []

    def fake_card(title: str, body: str, **kwargs) -> None:
        called_cards.append((title, body))

    monkeypatch.setattr(card_weather_module, "card", fake_card)

    card_weather_module.card_weather_lookup()

    assert called_cards, "Virhetilanteessa card() pitäisi kutsua"
    title, body = called_cards[0]
    assert title == "Weather"
    assert "Error: oops" in body
