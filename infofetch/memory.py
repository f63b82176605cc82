"""Memory usage from /proc/meminfo."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from .custom import ModuleError

__all__ = ["Memory", "parse_meminfo", "format_memory", "read_memory"]

MODULE_NAME = "Memory"

_LINE_RE = re.compile(r"^(\w+):\s*(\d+)")
_FIELDS = ("MemTotal", "Shmem", "MemFree", "Buffers", "Cached", "SReclaimable")


@dataclass(frozen=True)
class Memory:
    """Used and total memory in MiB."""

    used_mib: int
    total_mib: int

    @property
    def percentage(self) -> int:
        if self.total_mib == 0:
            return 0
        return int(self.used_mib / self.total_mib * 100)


def parse_meminfo(text: str) -> Memory:
    """Compute used and total memory from meminfo content."""
    values = dict.fromkeys(_FIELDS, 0)
    for line in text.splitlines():
        match = _LINE_RE.match(line)
        if match and match.group(1) in values:
            values[match.group(1)] = int(match.group(2))

    used_kib = (
        values["MemTotal"] + values["Shmem"] - values["MemFree"]
        - values["Buffers"] - values["Cached"] - values["SReclaimable"]
    )
    memory = Memory(used_mib=used_kib // 1024, total_mib=values["MemTotal"] // 1024)

    if memory.used_mib == 0 and memory.total_mib == 0 and memory.percentage == 0:
        raise ModuleError(MODULE_NAME, "/proc/meminfo couldn't be parsed")
    return memory


def format_memory(memory: Memory) -> str:
    """The default memory line."""
    return f"{memory.used_mib}MiB / {memory.total_mib}MiB ({memory.percentage}%)"


def read_memory(path: str | Path = "/proc/meminfo") -> Memory:
    """Read and parse a meminfo file."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise ModuleError(MODULE_NAME, f'cannot open "{path}"') from exc
    return parse_meminfo(text)