"""The media player that is currently active."""

from __future__ import annotations

from .custom import ModuleError
from .strbuf import substr_before_first, substr_before_last

__all__ = ["site_name", "format_player"]

MODULE_NAME = "Media Player"

_URL_PREFIXES = ("https://www.", "http://www.", "https://", "http://")


def site_name(url: str) -> str:
    """A readable website name from a URL, or an empty string.

    The path and the top-level domain are removed; a name without
    subdomains gets a capital first letter.
    """
    prefix = next((p for p in _URL_PREFIXES if url.startswith(p)), None)
    if prefix is None:
        return ""

    name = url[len(prefix):]
    if name:
        name = substr_before_first(name, "/")
        name = substr_before_last(name, ".")
    if name and "." not in name:
        name = name[0].upper() + name[1:]
    return name


def format_player(player: str, url: str = "") -> str:
    """The default player line, naming the website when the player shows one."""
    if not player:
        raise ModuleError(MODULE_NAME, "No media player found")
    site = site_name(url)
    return f"{site} ({player})" if site else player