"""Hex color conversion for Google Docs text styles.

The Docs API represents colors as RGB floats in the range 0-1.
"""

from __future__ import annotations

import re

from extratext.api_types import RgbColor

_HEX_COLOR_RE = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


def hex_to_rgb(hex_color: str) -> RgbColor | None:
    """Convert a hex color string to an API RGB color.

    Args:
        hex_color: Hex color string like "#4285f4" or "4285f4"

    Returns:
        RgbColor with each component between 0.0 and 1.0, or None when the
        string is not exactly six hex digits (optionally prefixed with "#")
    """
    match = _HEX_COLOR_RE.fullmatch(hex_color)
    if match is None:
        return None

    r, g, b = (int(part, 16) / 255.0 for part in match.groups())
    return RgbColor(red=r, green=g, blue=b)
