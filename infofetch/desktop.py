"""Desktop environment and window manager lines."""

from __future__ import annotations

from .custom import ModuleError

__all__ = ["format_de", "format_wm"]

DE_MODULE_NAME = "DE"
WM_MODULE_NAME = "WM"


def format_de(name: str, version: str = "") -> str:
    """The desktop environment's name, followed by its version if known."""
    if not name:
        raise ModuleError(DE_MODULE_NAME, "No DE found")
    return f"{name} {version}" if version else name


def format_wm(name: str, protocol: str = "") -> str:
    """The window manager's name, followed by its display protocol if known."""
    if not name:
        raise ModuleError(WM_MODULE_NAME, "No WM found")
    return f"{name} ({protocol})" if protocol else name