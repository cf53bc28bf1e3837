# weather_icons.py
"""
Inline-SVG ikonit (Lucide-tyyli) suljetusta IconKey-joukosta.

Polkudata on staattinen taulukko; ulkoisista lähteistä tulevaa merkkijonoa
ei koskaan upoteta SVG-merkintään.
"""

from __future__ import annotations

import html
from typing import Final

from weatherlookup.api.wmo_codes import IconKey

_SVG_PATHS: Final[dict[IconKey, str]] = {
    IconKey.CLOUD: (
        '<path d="M17.5 19H9a7 7 0 1 1 6.71-9h.79a4.5 4.5 0 1 1 0 9Z"/>'
        '<path d="M22 10a4 4 0 0 0-3.32-5.91l-.22-.05"/>'
        '<path d="M18 10a4 4 0 0 0-3.32-5.91l-.22-.05"/>'
    ),
    IconKey.SUN: (
        '<circle cx="12" cy="12" r="4"/>'
        '<path d="M12 2v2"/><path d="M12 20v2"/>'
        '<path d="m4.93 4.93 1.41 1.41"/><path d="m17.66 17.66 1.41 1.41"/>'
        '<path d="M2 12h2"/><path d="M20 12h2"/>'
        '<path d="m6.34 17.66-1.41 1.41"/><path d="m19.07 4.93-1.41 1.41"/>'
    ),
    IconKey.CLOUD_RAIN: (
        '<path d="M4 14.5a3.5 3.5 0 0 1 3.28-3.34 5.5 5.5 0 0 1 10.32-1.22 3.5 3.5 0 0 1 1.28 6.55"/>'
        '<path d="m16 21-4-4-4 4"/>'
    ),
    IconKey.CLOUD_LIGHTNING: (
        '<path d="M6 10a7 7 0 1 1 6.71 9H17a4 4 0 0 1 0 8H7a4 4 0 0 1-.72-7.28"/>'
        '<path d="m13 15-4-8 5 4 4-8"/>'
    ),
    IconKey.CLOUD_SNOW: (
        '<path d="M4 14.5a3.5 3.5 0 0 1 3.28-3.34 5.5 5.5 0 0 1 10.32-1.22 3.5 3.5 0 0 1 1.28 6.55"/>'
        '<path d="M10 20h.01"/><path d="M14 20h.01"/>'
        '<path d="M12 18h.01"/><path d="M16 20h.01"/>'
    ),
    IconKey.FOG: (
        '<path d="M3 11s2 3 7 3 7-3 7-3"/><path d="M3 15s2 3 7 3 7-3 7-3"/>'
        '<path d="M17 11s2 3 7 3 7-3 7-3"/><path d="M17 15s2 3 7 3 7-3 7-3"/>'
        '<path d="M7 11s2 3 7 3 7-3 7-3"/><path d="M7 15s2 3 7 3 7-3 7-3"/>'
    ),
    IconKey.THERMOMETER_SUN: (
        '<path d="M14 4a2 2 0 1 0 0 4"/>'
        '<path d="M12 2v2"/><path d="M12 20v2"/>'
        '<path d="m4.93 4.93 1.41 1.41"/><path d="m17.66 17.66 1.41 1.41"/>'
        '<path d="M2 12h2"/><path d="M20 12h2"/>'
        '<path d="m6.34 17.66-1.41 1.41"/><path d="m19.07 4.93-1.41 1.41"/>'
    ),
}


def _resolve_icon(key: IconKey | str) -> IconKey:
    try:
        return IconKey(key)
    except ValueError:
        return IconKey.SUN


def render_weather_icon(key: IconKey | str, size: int = 24, css_class: str = "") -> str:
    """
    key = IconKey tai sen arvo ('cloud-rain'). Palauttaa <svg>-HTML:n.
    Tuntematon avain → aurinko.
    """
    icon = _resolve_icon(key)
    px = int(size)
    cls = f' class="{html.escape(css_class, quote=True)}"' if css_class else ""
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{px}" height="{px}" '
        'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
        f'stroke-linecap="round" stroke-linejoin="round"{cls} data-icon="{icon.value}">'
        f"{_SVG_PATHS[icon]}</svg>"
    )
