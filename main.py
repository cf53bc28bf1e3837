# main.py
"""Main entry point for the weather lookup Streamlit application."""

import sys
import traceback

import streamlit as st

from weatherlookup.logger_config import setup_logging
from weatherlookup.paths import ensure_dirs
from weatherlookup.ui import card_weather_lookup
from weatherlookup.ui.common import load_css

ensure_dirs()

logger = setup_logging()


def main() -> None:
    """Initialize and render the weather lookup page."""
    try:
        st.set_page_config(
            page_title="Weather Lookup",
            layout="centered",
            page_icon="🌤️",
        )
        load_css("style.css")

        st.markdown(
            """
            <header class="wl-header">
              <h1>Weather Lookup</h1>
              <p>Real-time &amp; 5-Day Forecast</p>
            </header>
            """,
            unsafe_allow_html=True,
        )

        card_weather_lookup()

    except KeyboardInterrupt:
        logger.info("Weather lookup shutdown requested")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unhandled error: {str(e)}")
        logger.error(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
