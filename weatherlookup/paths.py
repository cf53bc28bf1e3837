"""
paths.py – keskitetyt polut sovellukselle.

    from weatherlookup.paths import ASSETS, LOGS, asset_path

…ja saat oikean polun riippumatta siitä, kutsutaanko sovellusta
projektin juuresta (streamlit run main.py) vai jostain muualta.
"""

from __future__ import annotations

from pathlib import Path

_THIS_FILE = Path(__file__).resolve()

# weatherlookup/paths.py -> weatherlookup -> projektin juuri
ROOT_DIR = _THIS_FILE.parent.parent

ASSETS = ROOT_DIR / "assets"
LOGS = ROOT_DIR / "logs"


def root_path(*parts: str) -> Path:
    """Palauttaa polun projektin juureen suhteessa."""
    return ROOT_DIR.joinpath(*parts)


def asset_path(*parts: str) -> Path:
    """Palauttaa polun assets-kansioon."""
    return ASSETS.joinpath(*parts)


def ensure_dirs() -> None:
    """Varmistaa, että logs/-hakemisto on olemassa."""
    LOGS.mkdir(parents=True, exist_ok=True)
