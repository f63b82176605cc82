"""Title, separator and color-block lines."""

from __future__ import annotations

__all__ = ["separator_line", "title_line", "color_blocks", "BOLD", "RESET", "BLOCK"]

BOLD = "\033[1m"
RESET = "\033[0m"
BLOCK = "███"


def separator_line(length: int, pattern: str = "") -> str:
    """A line of ``length`` characters built by repeating ``pattern`` (dashes by default)."""
    if length < 0:
        raise ValueError("length cannot be negative")
    pattern = pattern or "-"
    full, rest = divmod(length, len(pattern))
    return pattern * full + pattern[:rest]


def _title_part(text: str, color: str) -> str:
    color_code = f"\033[{color}m" if color else ""
    return f"{BOLD}{color_code}{text}{RESET}"


def title_line(user: str, host: str, color: str = "") -> str:
    """``user@host`` with both parts bold and in the given SGR color."""
    return f"{_title_part(user, color)}@{_title_part(host, color)}"


def color_blocks() -> tuple[str, str]:
    """Two lines showing the eight normal and the eight bright terminal colors."""
    normal = "".join(f"\033[4{i};3{i}m{BLOCK}" for i in range(8)) + RESET
    bright = "".join(f"\033[1;4{i};3{i};10{i};9{i}m{BLOCK}" for i in range(8)) + RESET
    return normal, bright