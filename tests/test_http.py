# tests/test_http.py
from __future__ import annotations

import pytest
import requests

import weatherlookup.api.http as http


class DummyResp:
    def __init__(self, status: int, payload: dict | None = None):
        self.status_code = status
        self._payload = payload or {}

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self) -> dict:
        return self._payload


def test_http_get_json_success_passes_params_and_headers(monkeypatch):
    captured = {}

    def fake_get(url, params=None, timeout=None, headers=None):
        captured.update(url=url, params=params, timeout=timeout, headers=headers)
        return DummyResp(200, {"ok": True})

    monkeypatch.setattr(http.requests, "get", fake_get)

    out = http.http_get_json("https://example.com/x", params={"a": 1}, timeout=3.0)

    assert out == {"ok": True}
    assert captured["params"] == {"a": 1}
    assert captured["timeout"] == 3.0
    assert captured["headers"]["User-Agent"] == http.USER_AGENT


def test_http_get_json_reports_and_reraises(monkeypatch):
    monkeypatch.setattr(http.requests, "get", lambda *a, **k: DummyResp(503))

    reported = []
    monkeypatch.setattr(http, "report_error", lambda ctx, e: reported.append((ctx, e)))

    with pytest.raises(requests.HTTPError):
        http.http_get_json("https://example.com/down")

    assert len(reported) == 1
    assert "https://example.com/down" in reported[0][0]
