# weatherlookup/api/http.py
from __future__ import annotations

import logging
from typing import Any

import requests

from weatherlookup.config import HTTP_TIMEOUT_S, USER_AGENT
from weatherlookup.utils import report_error

logger = logging.getLogger("weatherlookup")


def http_get_json(
    url: str,
    params: dict[str, Any] | None = None,
    timeout: float = HTTP_TIMEOUT_S,
) -> dict:
    """GET + raise_for_status + JSON. Virheet raportoidaan ja nostetaan eteenpäin."""
    headers = {"User-Agent": USER_AGENT}
    try:
        resp = requests.get(url, params=params, timeout=timeout, headers=headers)
        resp.raise_for_status()
        logger.debug("GET %s -> %s", url, resp.status_code)
        return resp.json()
    except Exception as e:
        report_error(f"http_get_json: {url}", e)
        raise
