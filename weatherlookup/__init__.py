"""Weather lookup widget: Open-Meteo geocoding + forecast rendered with Streamlit."""
