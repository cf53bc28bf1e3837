# weatherlookup/ui/card_weather.py
from __future__ import annotations

import html

import streamlit as st
from streamlit.components.v1 import html as st_html

from weatherlookup.api.wmo_codes import IconKey
from weatherlookup.ui.common import card, section_title
from weatherlookup.viewmodels.weather_lookup import (
    ForecastCard,
    LookupView,
    WeatherLookupController,
    build_lookup_view,
)
from weatherlookup.weather_icons import render_weather_icon

CONTROLLER_KEY = "weather_lookup"
SEARCH_KEY = "weather_search_term"


def _get_controller() -> WeatherLookupController:
    """Yksi ohjain per Streamlit-sessio."""
    controller = st.session_state.get(CONTROLLER_KEY)
    if controller is None:
        controller = WeatherLookupController()
        st.session_state[CONTROLLER_KEY] = controller
    if SEARCH_KEY not in st.session_state:
        st.session_state[SEARCH_KEY] = controller.location
    return controller


def _render_search(controller: WeatherLookupController) -> tuple[bool, str]:
    with st.form("weather_search_form", clear_on_submit=False):
        term = st.text_input(
            "City Search Input",
            key=SEARCH_KEY,
            placeholder="Enter City Name (e.g., Mumbai, Chennai, Kolkata)",
            label_visibility="collapsed",
        )
        label = "Searching..." if controller.loading else "Search"
        submitted = st.form_submit_button(label, disabled=controller.loading)
    return bool(submitted), str(term or "")


def _render_error(message: str) -> None:
    st.markdown(
        f"""
        <div class="wl-error">
          <p class="wl-error-title">Error:</p>
          <p>{html.escape(message)}</p>
          <p class="wl-error-hint">Hint: Try a different city spelling or check your connection.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )


def _render_current(view: LookupView) -> None:
    place = html.escape(view.city)
    if view.country:
        place += f", {html.escape(view.country)}"
    icon_html = render_weather_icon(view.icon or IconKey.THERMOMETER_SUN, size=64, css_class="wl-icon")

    def tile(label: str, value: str) -> str:
        return (
            f'<div class="wl-tile"><div class="wl-tile-label">{label}</div>'
            f'<div class="wl-tile-value">{html.escape(value)}</div></div>'
        )

    tiles = "".join(
        [
            tile("Feels Like", view.feels_like),
            tile("Humidity", view.humidity),
            tile("Wind Speed", view.wind),
            tile("Today", view.today),
        ]
    )

    st.markdown(
        f"""
        <section class="wl-current">
          <div class="wl-main">
            <h2>{place}</h2>
            <div class="wl-temp">{icon_html}<span>{html.escape(view.temp)}</span></div>
            <p class="wl-desc">{html.escape(view.description)}</p>
          </div>
          <div class="wl-tiles">{tiles}</div>
        </section>
        """,
        unsafe_allow_html=True,
    )


def _forecast_cell(day: ForecastCard) -> str:
    icon_html = render_weather_icon(day.icon, size=36)
    return f"""
        <div class="forecast-cell">
          <div class="day">{html.escape(day.day)}</div>
          <div class="icon">{icon_html}</div>
          <div class="temp">{html.escape(day.temp)}</div>
          <div class="desc">{html.escape(day.description)}</div>
        </div>
    """


def _render_forecast(view: LookupView) -> None:
    section_title("5-Day Forecast", mt=18, mb=4)

    inner_html = (
        """
        <!doctype html>
        <html><head><meta charset="utf-8">
        <style>
          :root { --fg:#eef0ff; --bg2:rgba(255,255,255,0.12); }
          html,body {margin:0;padding:0;background:transparent;color:var(--fg);
                     font-family:ui-sans-serif,system-ui,-apple-system,Segoe UI,Roboto,Ubuntu;}
          .forecast-row {display:grid;grid-template-columns:repeat(5,minmax(88px,1fr));
                         gap:10px;align-items:stretch;padding:4px 2px;}
          .forecast-cell {display:grid;grid-template-rows:auto 1fr auto auto;
                          align-items:center;justify-items:center;
                          background:var(--bg2);border-radius:14px;
                          padding:8px 6px;min-height:120px;}
          .day{font-size:.85rem;text-transform:uppercase;opacity:.9;}
          .icon{color:#a5b4fc;}
          .icon svg{width:36px;height:36px;display:block;}
          .temp{font-size:1.3rem;font-weight:700;margin-top:6px;}
          .desc{font-size:.75rem;opacity:.85;margin-top:2px;}
        </style></head><body>
          <div class="forecast-row">
        """
        + "".join(_forecast_cell(d) for d in view.forecast)
        + "</div></body></html>"
    )

    st_html(inner_html, height=150, scrolling=False)


def card_weather_lookup() -> None:
    """Render the city search, current conditions and the 5-day forecast strip."""
    try:
        controller = _get_controller()
        submitted, term = _render_search(controller)

        with st.spinner("Fetching weather data..."):
            if submitted:
                controller.submit(term)
            else:
                controller.ensure_loaded()

        view = build_lookup_view(controller)

        if view.error:
            _render_error(view.error)
            return

        if not view.has_data:
            return

        _render_current(view)
        _render_forecast(view)
        st.markdown(
            "<p class='wl-note'>Data provided by Open-Meteo (no API key required).</p>",
            unsafe_allow_html=True,
        )

    except Exception as e:
        card("Weather", f"<span class='hint'>Error: {html.escape(str(e))}</span>", height_dvh=15)
