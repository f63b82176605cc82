"""Shared result types and the plain key/value output line."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ModuleError", "Entry", "format_line", "KEY_SEPARATOR"]

KEY_SEPARATOR = ": "


class ModuleError(Exception):
    """Raised when a module cannot produce its information."""

    def __init__(self, module: str, message: str) -> None:
        super().__init__(f"{module}: {message}")
        self.module = module
        self.message = message


def format_line(key: str, value: str) -> str:
    """Join a key and its value into one output line."""
    return f"{key}{KEY_SEPARATOR}{value}"


@dataclass(frozen=True)
class Entry:
    """One line of output: a key and the value shown for it."""

    key: str
    value: str

    def __str__(self) -> str:
        return format_line(self.key, self.value)