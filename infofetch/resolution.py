"""Screen resolution lines."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .custom import Entry, ModuleError

__all__ = ["Resolution", "format_resolution", "resolution_entries"]

MODULE_NAME = "Resolution"


@dataclass(frozen=True)
class Resolution:
    """Size of one display in pixels and its refresh rate in Hz (0 if unknown)."""

    width: int
    height: int
    refresh_rate: int = 0


def format_resolution(resolution: Resolution) -> str:
    """The default text: ``WIDTHxHEIGHT`` and the refresh rate if known."""
    text = f"{resolution.width}x{resolution.height}"
    if resolution.refresh_rate > 0:
        text += f" @ {resolution.refresh_rate}Hz"
    return text


def resolution_entries(resolutions: Sequence[Resolution]) -> list[Entry]:
    """One entry per display; displays are numbered from 1 when there are several."""
    if not resolutions:
        raise ModuleError(MODULE_NAME, "Couldn't detect resolution")
    if len(resolutions) == 1:
        return [Entry(MODULE_NAME, format_resolution(resolutions[0]))]
    return [
        Entry(f"{MODULE_NAME} {index}", format_resolution(resolution))
        for index, resolution in enumerate(resolutions, start=1)
    ]