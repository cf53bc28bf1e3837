from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import date, datetime, tzinfo
from typing import Any

import pandas as pd

from weatherlookup.config import HOUR_PREFIX_LEN


def _cast_to_float(value: Any) -> float | None:
    """Muunna annettu arvo float-tyypiksi, tai palauta None jos muunnos epäonnistuu."""
    if isinstance(value, str):
        value = value.strip().replace(",", ".")

    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def _cast_to_int(value: Any) -> int | None:
    """Muunna annettu arvo int-tyypiksi, tai palauta None jos muunnos epäonnistuu."""
    if isinstance(value, str):
        value = value.strip().replace(",", ".")

    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None

    # 0.9 tai 57.5 ei ole WMO-koodi, ei katkaista
    if not number.is_integer():
        return None
    return int(number)


def _normalize_scalar(value: Any) -> Any | None:
    """
    Yhtenäinen esikäsittely eri lähdetyypeille:
    - None → None
    - NaN / pandas NA → None
    - numpy-scalar tms. → .item()
    """
    if value is None:
        return None

    if isinstance(value, bool):
        # JSON true/false ei ole lämpötila eikä koodi
        return None

    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        # listat yms. eivät ole skalaareja
        return None

    if hasattr(value, "item"):
        value = value.item()

    return value


def safe_cast(value: Any, type_: type) -> Any | None:
    """
    Turvallinen muunnos int- tai float-tyypiksi.

    Palauttaa None, jos arvo puuttuu tai muunnos ei onnistu.
    """
    value = _normalize_scalar(value)
    if value is None:
        return None

    if type_ is int:
        return _cast_to_int(value)
    if type_ is float:
        return _cast_to_float(value)
    raise TypeError(f"safe_cast: unsupported type {type_!r}")


def as_int(x: Any) -> int | None:
    return safe_cast(x, int)


def as_float(x: Any) -> float | None:
    result = safe_cast(x, float)
    # float("inf") menee castista läpi mutta ei ole järkevä mittaus
    if result is not None and not math.isfinite(result):
        return None
    return result


def value_at(values: Sequence[Any] | None, idx: int) -> Any | None:
    """Rinnakkaislistan alkio tai None, jos lista on lyhyempi."""
    if not values or idx < 0 or idx >= len(values):
        return None
    return values[idx]


def match_humidity(
    current_time: str | None,
    times: Sequence[Any] | None,
    values: Sequence[Any] | None,
) -> float | None:
    """
    Etsii nykyhetken suhteellisen kosteuden tuntisarjasta.

    1) tarkka aikaleima
    2) sama tunti (ensimmäiset 13 merkkiä, 'YYYY-MM-DDTHH')
    3) None = ei saatavilla
    """
    if not isinstance(current_time, str) or not current_time:
        return None
    if not isinstance(times, Sequence) or isinstance(times, str) or not values:
        return None

    try:
        idx = list(times).index(current_time)
    except ValueError:
        idx = -1

    if idx == -1:
        hour_only = current_time[:HOUR_PREFIX_LEN]
        idx = next(
            (
                i
                for i, t in enumerate(times)
                if isinstance(t, str) and t[:HOUR_PREFIX_LEN] == hour_only
            ),
            -1,
        )

    if idx == -1:
        return None

    return as_float(value_at(values, idx))


def iso_date_to_epoch(date_str: str, tz: tzinfo | None = None) -> int:
    """
    'YYYY-MM-DD' → epoch-sekunnit päivän keskiyöltä.

    tz=None tulkitsee keskiyön järjestelmän paikallisajassa.
    """
    day = date.fromisoformat(date_str[:10])
    midnight = datetime(day.year, day.month, day.day, tzinfo=tz)
    return int(midnight.timestamp())
