# weatherlookup/utils.py
"""General-purpose utility functions for the weather lookup application."""

import logging

import streamlit as st

from weatherlookup.config import DEV

logger = logging.getLogger("weatherlookup")


def report_error(ctx: str, e: Exception) -> None:
    """Log errors and, in DEV mode, display them in the Streamlit UI."""
    logger.error("%s: %s: %s", ctx, type(e).__name__, e)
    if DEV:
        st.caption(f"⚠ {ctx}: {type(e).__name__}: {e}")
