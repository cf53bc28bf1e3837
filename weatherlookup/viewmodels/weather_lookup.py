from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from weatherlookup.api import get_weather_for_location
from weatherlookup.api.errors import WeatherLookupError
from weatherlookup.api.models import CurrentConditions, ForecastDay, WeatherReport
from weatherlookup.api.wmo_codes import IconKey, weather_code_to_icon
from weatherlookup.config import DEFAULT_CITY
from weatherlookup.utils_format import (
    day_name,
    format_humidity,
    format_short_date,
    format_temp,
    format_wind,
)

logger = logging.getLogger("weatherlookup")

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred while fetching weather data."


class LookupState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


class WeatherLookupController:
    """
    Hakukortin tila: yksi aktiivinen sijainti ja yksi aktiivinen haun tulos.

    Tilat IDLE → LOADING → (SUCCESS | FAILURE). Jokainen hyväksytty submit()
    käynnistää täsmälleen yhden haun. Jokainen haku saa generaatiotunnisteen;
    vanhemman haun tulos hylätään, jos uudempi on jo aloitettu.
    """

    def __init__(
        self,
        location: str = DEFAULT_CITY,
        fetch: Callable[[str], WeatherReport] | None = None,
    ) -> None:
        self.location = location
        self.state = LookupState.IDLE
        self.current: CurrentConditions | None = None
        self.forecast: list[ForecastDay] = []
        self.error: str | None = None
        self._generation = 0
        # None → haetaan moduulitason funktio kutsuhetkellä (monkeypatch-ystävällinen)
        self._fetch = fetch

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def loading(self) -> bool:
        return self.state is LookupState.LOADING

    def is_unchanged(self, text: str) -> bool:
        return text.strip().lower() == self.location.lower()

    def submit(self, text: str) -> bool:
        """
        Käyttäjän haku. Palauttaa True, jos haku käynnistettiin.

        Tyhjä tai nykyisen sijainnin kanssa sama teksti ei tee mitään.
        """
        query = text.strip()
        if not query:
            return False
        if self.is_unchanged(query):
            logger.debug("Lookup skipped, %r already active", query)
            return False

        self.location = query
        self.run_lookup(query)
        return True

    def ensure_loaded(self) -> None:
        """Ensimmäinen haku oletussijainnille, jos mitään ei ole vielä haettu."""
        if self.state is LookupState.IDLE:
            self.run_lookup(self.location)

    def begin_lookup(self) -> int:
        """Siirtyy LOADING-tilaan ja palauttaa uuden haun generaation."""
        self._generation += 1
        self.state = LookupState.LOADING
        self.error = None
        return self._generation

    def complete_lookup(self, generation: int, report: WeatherReport) -> bool:
        if generation != self._generation:
            logger.info("Discarding stale weather result (gen %s < %s)", generation, self._generation)
            return False

        self.current = report.current
        self.forecast = list(report.forecast)
        self.location = report.place.name
        self.error = None
        self.state = LookupState.SUCCESS
        return True

    def fail_lookup(self, generation: int, message: str) -> bool:
        if generation != self._generation:
            logger.info("Discarding stale lookup failure (gen %s < %s)", generation, self._generation)
            return False

        self.current = None
        self.forecast = []
        self.error = message
        self.state = LookupState.FAILURE
        return True

    def run_lookup(self, location: str) -> None:
        generation = self.begin_lookup()
        fetch = self._fetch or get_weather_for_location
        logger.info("Weather lookup #%s for %r", generation, location)

        try:
            report = fetch(location)
        except WeatherLookupError as e:
            logger.warning("Weather lookup #%s failed: %s", generation, e)
            self.fail_lookup(generation, str(e))
            return
        except Exception:
            logger.exception("Weather lookup #%s crashed", generation)
            self.fail_lookup(generation, UNKNOWN_ERROR_MESSAGE)
            return

        self.complete_lookup(generation, report)


# --- näkymämalli korttia varten ------------------------------------------------
@dataclass
class ForecastCard:
    """UI:lle valmis ennustekortti yhdelle päivälle."""

    day: str  # "Mon"
    icon: IconKey
    temp: str  # "31°C" / "--"
    description: str


@dataclass
class LookupView:
    state: LookupState
    location: str
    loading: bool
    error: str | None = None
    city: str = ""
    country: str | None = None
    temp: str = "--"
    description: str = ""
    icon: IconKey | None = None
    feels_like: str = "--"
    humidity: str = "--"
    wind: str = "--"
    today: str = ""
    forecast: list[ForecastCard] = field(default_factory=list)

    @property
    def has_data(self) -> bool:
        return self.state is LookupState.SUCCESS and not self.error


def build_lookup_view(controller: WeatherLookupController, today: date | None = None) -> LookupView:
    """Muuntaa ohjaimen tilan valmiiksi muotoilluksi näkymämalliksi."""
    view = LookupView(
        state=controller.state,
        location=controller.location,
        loading=controller.loading,
        error=controller.error,
    )

    cw = controller.current
    if controller.state is not LookupState.SUCCESS or cw is None:
        return view

    view.city = cw.place.name
    view.country = cw.place.country
    view.temp = format_temp(cw.temperature)
    view.description = cw.condition_text
    view.icon = weather_code_to_icon(cw.weather_code)
    view.feels_like = format_temp(cw.apparent_temperature)
    view.humidity = format_humidity(cw.humidity_percent)
    view.wind = format_wind(cw.wind_speed)
    view.today = format_short_date(today or date.today())
    view.forecast = [
        ForecastCard(
            day=day_name(d.epoch_seconds),
            icon=weather_code_to_icon(d.weather_code),
            temp=format_temp(d.temperature),
            description=d.condition_text,
        )
        for d in controller.forecast
    ]
    return view
