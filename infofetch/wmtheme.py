"""Window manager theme detection helpers."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from .custom import ModuleError
from .strbuf import equals_ignore_case, remove_strings, trim, trim_right

__all__ = [
    "WMThemeSource",
    "strip_plasma_prefixes",
    "parse_openbox_theme",
    "openbox_config_path",
    "combine_muffin",
    "wm_theme_source",
    "KWIN_DEFAULT_THEME",
]

MODULE_NAME = "WM Theme"
KWIN_DEFAULT_THEME = "Breeze"


class WMThemeSource(enum.Enum):
    """Where the theme of a window manager is read from."""

    KWIN_CONFIG = "kwinrc"
    XFWM4 = "xfwm4"
    MUTTER = "mutter"
    GTK = "gtk"
    MUFFIN = "muffin"
    MARCO = "marco"
    OPENBOX = "openbox"


def strip_plasma_prefixes(theme: str) -> str:
    """Drop the "qml_" and "svg__" prefixes that Plasma puts before theme names."""
    for marker in ("qml_", "svg__"):
        index = theme.find(marker)
        if index != -1:
            theme = theme[index + len(marker):]
    return theme


def parse_openbox_theme(lines: Iterable[str]) -> str:
    """The name inside the <theme> section of an Openbox rc.xml, or an empty string."""
    iterator = iter(lines)
    for line in iterator:
        if "<theme>" in line:
            break
    else:
        return ""

    for line in iterator:
        if "<name>" in line:
            name = remove_strings(line, ("<name>", "</name>"))
            return trim(trim_right(name, "\n"), " ")
        if "</theme>" in line:
            break
    return ""


def openbox_config_path(home: str, de_name: str) -> str:
    """The Openbox configuration file used under the given desktop environment."""
    if equals_ignore_case(de_name, "LXQT"):
        filename = "lxqt-rc.xml"
    elif equals_ignore_case(de_name, "LXDE"):
        filename = "lxde-rc.xml"
    else:
        filename = "rc.xml"
    return f"{home}/.config/openbox/{filename}"


def combine_muffin(name: str | None, theme: str | None) -> str:
    """Join Cinnamon's shell theme name and its window theme."""
    if name is None and theme is None:
        raise ModuleError(MODULE_NAME, "Couldn't find muffin theme in GSettings / DConf")
    if name is None:
        return theme  # type: ignore[return-value]
    if theme is None:
        return name
    return f"{name} ({theme})"


def wm_theme_source(wm_name: str, de_name: str = "") -> WMThemeSource:
    """Decide where the theme of the named window manager is found."""
    if not wm_name:
        raise ModuleError(MODULE_NAME, "WM Theme needs sucessfull WM detection")

    def is_any(*names: str) -> bool:
        return any(equals_ignore_case(wm_name, name) for name in names)

    if is_any("KWin", "KDE", "Plasma"):
        return WMThemeSource.KWIN_CONFIG
    if is_any("Xfwm4", "Xfwm"):
        return WMThemeSource.XFWM4
    if is_any("Mutter"):
        return WMThemeSource.MUTTER if equals_ignore_case(de_name, "Gnome") else WMThemeSource.GTK
    if is_any("Muffin"):
        return WMThemeSource.MUFFIN
    if is_any("Marco"):
        return WMThemeSource.MARCO
    if is_any("Openbox"):
        return WMThemeSource.OPENBOX
    raise ModuleError(MODULE_NAME, f"Unknown WM: {wm_name}")