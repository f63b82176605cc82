"""Cursor theme naming and the choice of where to look for it."""

from __future__ import annotations

import enum
import os
from collections.abc import Mapping

from .strbuf import equals_ignore_case, remove_suffix_ignore_case, starts_with_ignore_case, trim_right

__all__ = [
    "CursorSource",
    "CONFIG_FILE_QUERIES",
    "prettify_cursor_theme",
    "format_cursor",
    "cursor_from_env",
    "cursor_source",
]

MODULE_NAME = "Cursor"


class CursorSource(enum.Enum):
    """Where the cursor theme of a desktop environment is read from."""

    KDE = "kde"
    XFCE = "xfce"
    LXQT = "lxqt"
    GTK = "gtk"
    GENERIC = "generic"


# Config file, theme key, default theme, size key, default size.
CONFIG_FILE_QUERIES = {
    CursorSource.KDE: ("kcminputrc", "cursorTheme", "Breeze", "cursorSize", "24"),
    CursorSource.LXQT: ("lxqt/session.conf", "cursor_theme", "Adwaita", "cursor_size", "24"),
}


def prettify_cursor_theme(theme: str) -> str:
    """Drop a trailing "cursors"/"cursor" word and separators; empty becomes "default"."""
    theme = remove_suffix_ignore_case(theme, "cursors")
    theme = remove_suffix_ignore_case(theme, "cursor")
    theme = trim_right(theme, "_")
    theme = trim_right(theme, "-")
    return theme or "default"


def format_cursor(theme: str, size: str | None = None) -> str:
    """The default cursor line: the theme and, if known, its size in pixels."""
    text = prettify_cursor_theme(theme)
    if size:
        text += f" ({size}px)"
    return text


def cursor_from_env(environ: Mapping[str, str] | None = None) -> tuple[str, str] | None:
    """Theme and size from XCURSOR_THEME and XCURSOR_SIZE, or None if no theme is set."""
    environ = os.environ if environ is None else environ
    theme = environ.get("XCURSOR_THEME", "")
    if not theme:
        return None
    return theme, environ.get("XCURSOR_SIZE", "")


def cursor_source(de_name: str) -> CursorSource:
    """Decide where the cursor theme of the named desktop environment is found."""
    if equals_ignore_case(de_name, "KDE Plasma"):
        return CursorSource.KDE
    if starts_with_ignore_case(de_name, "XFCE"):
        return CursorSource.XFCE
    if starts_with_ignore_case(de_name, "LXQt"):
        return CursorSource.LXQT
    if any(equals_ignore_case(de_name, name) for name in ("Gnome", "Cinnamon", "Mate")):
        return CursorSource.GTK
    return CursorSource.GENERIC