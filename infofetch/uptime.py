"""System uptime in days, hours and minutes."""

from __future__ import annotations

__all__ = ["split_uptime", "format_uptime"]


def split_uptime(seconds: float) -> tuple[int, int, int, int]:
    """Split seconds into (days, hours, minutes, seconds)."""
    total = int(seconds)
    if total < 0:
        raise ValueError("uptime cannot be negative")
    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, secs = divmod(rest, 60)
    return days, hours, minutes, secs


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''}"


def format_uptime(seconds: float) -> str:
    """The default uptime line; seconds are shown only below one minute."""
    days, hours, minutes, secs = split_uptime(seconds)

    if days == 0 and hours == 0 and minutes == 0:
        return f"{secs} seconds"

    parts = []
    if days > 0:
        parts.append(_plural(days, "day") + ("(!)" if days >= 100 else ""))
    if hours > 0:
        parts.append(_plural(hours, "hour"))
    if minutes > 0:
        parts.append(_plural(minutes, "min"))
    return ", ".join(parts)