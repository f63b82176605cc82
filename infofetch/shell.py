"""Shell and terminal lines."""

from __future__ import annotations

from .custom import ModuleError

__all__ = ["format_shell", "format_terminal"]

SHELL_MODULE_NAME = "Shell"
TERMINAL_MODULE_NAME = "Terminal"


def format_shell(exe_name: str, version: str = "") -> str:
    """The shell's executable name, followed by its version if known."""
    if not exe_name:
        raise ModuleError(SHELL_MODULE_NAME, "Couldn't detect shell")
    return f"{exe_name} {version}" if version else exe_name


def format_terminal(process_name: str, exe_name: str = "") -> str:
    """The terminal's executable name if it starts with the process name, else the process name."""
    if not process_name:
        raise ModuleError(TERMINAL_MODULE_NAME, "Couldn't detect terminal")
    return exe_name if exe_name.startswith(process_name) else process_name