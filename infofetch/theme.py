"""Plasma and GTK theme description."""

from __future__ import annotations

from .custom import ModuleError
from .strbuf import trim

__all__ = ["plasma_color_pretty", "format_theme"]

MODULE_NAME = "Theme"


def plasma_color_pretty(color_scheme: str, widget_style: str) -> str:
    """The color scheme with a leading widget style name removed."""
    if color_scheme.startswith(widget_style):
        color_scheme = color_scheme[len(widget_style):]
    return trim(color_scheme, " ")


def format_theme(widget_style: str, color_scheme: str, gtk: str) -> str:
    """The default theme line from Plasma's style and colors and the GTK summary."""
    if not widget_style and not color_scheme and not gtk:
        raise ModuleError(MODULE_NAME, "No themes found")

    color_text = plasma_color_pretty(color_scheme, widget_style) or color_scheme

    text = ""
    if widget_style:
        text = widget_style
        if color_scheme:
            text += f" ({color_text})"
    elif color_scheme:
        text = color_text

    if widget_style or color_scheme:
        text += " [Plasma]"
        if gtk:
            text += ", "

    return text + gtk