"""Build partial text style updates.

``updateTextStyle`` only touches the properties listed in its ``fields``
mask, so the builder returns the style payload together with the exact list
of field paths it sets. Unset attributes never appear in either; an
attribute explicitly set to ``False`` does.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from loguru import logger

from extratext.colors import hex_to_rgb


@dataclass(frozen=True)
class StyleRequest:
    """Optional text style attributes requested by a caller.

    ``None`` means "leave unchanged".
    """

    bold: bool | None = None
    italic: bool | None = None
    underline: bool | None = None
    font_size: float | None = None
    font_family: str | None = None
    foreground_color: str | None = None


@dataclass(frozen=True)
class TextStyleUpdate:
    """A TextStyle payload and the field mask that declares what it changes."""

    style: dict[str, Any]
    fields: tuple[str, ...]


def build_text_style(request: StyleRequest) -> TextStyleUpdate | None:
    """Build the style payload and field mask for a style request.

    Rules per attribute:
    - bold/italic/underline: applied whenever given, including ``False``
    - font_size: applied only when non-zero (a size of 0 cannot be set)
    - font_family: applied when non-empty
    - foreground_color: applied when it is a valid hex color; an invalid
      color is skipped without affecting the other attributes

    Returns:
        TextStyleUpdate, or None when no attribute ended up applied
    """
    style: dict[str, Any] = {}
    fields: list[str] = []

    if request.bold is not None:
        style["bold"] = request.bold
        fields.append("bold")
    if request.italic is not None:
        style["italic"] = request.italic
        fields.append("italic")
    if request.underline is not None:
        style["underline"] = request.underline
        fields.append("underline")
    if request.font_size:
        style["fontSize"] = {"magnitude": request.font_size, "unit": "PT"}
        fields.append("fontSize")
    if request.font_family:
        style["weightedFontFamily"] = {"fontFamily": request.font_family}
        fields.append("weightedFontFamily.fontFamily")
    if request.foreground_color:
        rgb = hex_to_rgb(request.foreground_color)
        if rgb is None:
            logger.warning(
                "Ignoring invalid foreground color {color!r}",
                color=request.foreground_color,
            )
        else:
            style["foregroundColor"] = {
                "color": {"rgbColor": rgb.model_dump(exclude_none=True)}
            }
            fields.append("foregroundColor")

    if not fields:
        return None
    return TextStyleUpdate(style=style, fields=tuple(fields))
