"""Overall processor usage measured from /proc/stat over an interval."""

from __future__ import annotations

import re
import time
from pathlib import Path

from .custom import ModuleError

__all__ = ["parse_stat", "usage_percent", "format_usage", "measure_usage"]

MODULE_NAME = "CPU Usage"

_STAT_RE = re.compile(r"cpu" + r"\s*(-?\d+)" * 7)


def parse_stat(text: str) -> tuple[int, int]:
    """Return the (work, total) jiffies of the aggregate cpu line."""
    match = _STAT_RE.match(text)
    if match is None:
        raise ModuleError(MODULE_NAME, "cannot parse the cpu line of /proc/stat")
    user, nice, system, idle, iowait, irq, softirq = map(int, match.groups())
    work = user + nice + system
    return work, work + idle + iowait + irq + softirq


def usage_percent(first: tuple[int, int], second: tuple[int, int]) -> float:
    """Percentage of busy time between two (work, total) samples."""
    work = second[0] - first[0]
    total = second[1] - first[1]
    if total == 0:
        raise ModuleError(MODULE_NAME, "no time elapsed between samples")
    return work / total * 100


def format_usage(percent: float) -> str:
    """Format a percentage with two decimals."""
    return f"{percent:.2f}%"


def measure_usage(path: str | Path = "/proc/stat", interval: float = 1.0) -> float:
    """Sample ``path`` twice, ``interval`` seconds apart, and return the usage."""
    path = Path(path)
    try:
        first = parse_stat(path.read_text())
        time.sleep(interval)
        second = parse_stat(path.read_text())
    except OSError as exc:
        raise ModuleError(MODULE_NAME, f'cannot open "{path}"') from exc
    return usage_percent(first, second)