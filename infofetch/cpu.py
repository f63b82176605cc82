"""Processor name, core count and frequency."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from .custom import ModuleError
from .strbuf import remove_strings, substr_before_first, trim_right

__all__ = [
    "CPUInfo",
    "parse_cpuinfo",
    "prettify_name",
    "read_ghz",
    "format_cpu",
    "detect_cpu",
]

MODULE_NAME = "CPU"

_REMOVE_STRINGS = (
    "(R)", "(r)", "(TM)", "(tm)",
    " CPU", " FPU", " APU", " Processor",
    " Dual-Core", " Quad-Core", " Six-Core", " Eight-Core", " Ten-Core",
    " 2-Core", " 4-Core", " 6-Core", " 8-Core", " 10-Core", " 12-Core", " 14-Core", " 16-Core",
)

_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_RE = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class CPUInfo:
    """Values of the first processor block of a cpuinfo file."""

    name: str = ""
    vendor: str = ""
    physical_cores: int = 1
    proc_ghz: float = 0.0


def _prop(line: str, key: str) -> str | None:
    pattern = r"^\s*" + r"\s*".join(map(re.escape, key.split())) + r"\s*:\s*(.*?)\s*$"
    match = re.match(pattern, line)
    return match.group(1) if match else None


def _parse_float(text: str) -> float:
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def parse_cpuinfo(text: str) -> CPUInfo:
    """Parse the first processor block of /proc/cpuinfo content."""
    name = vendor = cores = mhz = ""

    for line in text.splitlines():
        if name and line == "":
            break
        if (value := _prop(line, "model name")) is not None:
            name = value
        elif (value := _prop(line, "vendor_id")) is not None:
            vendor = value
        elif (value := _prop(line, "cpu cores")) is not None:
            cores = value
        elif (value := _prop(line, "cpu MHz")) is not None:
            mhz = value
        elif not name and (value := _prop(line, "Hardware")) is not None:
            name = value

    match = _INT_RE.match(cores)
    physical_cores = int(match.group(1)) if match else 1

    return CPUInfo(
        name=name,
        vendor=vendor,
        physical_cores=physical_cores,
        proc_ghz=_parse_float(mhz) / 1000.0,
    )


def prettify_name(name: str) -> str:
    """Drop trademarks, marketing words and the clock speed from a model name."""
    pretty = remove_strings(name, _REMOVE_STRINGS)
    pretty = substr_before_first(pretty, "@")
    return trim_right(pretty, " ")


def _read(path: str | Path) -> str:
    try:
        return Path(path).read_text(errors="replace")
    except OSError:
        return ""


def read_ghz(policy_file: str | Path, cpu_file: str | Path) -> float:
    """Read a frequency in kHz, preferring the policy file, and return GHz (0 if absent)."""
    content = _read(policy_file) or _read(cpu_file)
    if not content:
        return 0.0
    return _parse_float(content) / 1000.0 / 1000.0


def format_cpu(name: str, vendor: str, processors: int, ghz: float) -> str:
    """Build the default CPU line."""
    pretty = prettify_name(name)
    if pretty:
        text = pretty
    elif name:
        text = name
    elif vendor:
        text = f"{vendor} CPU"
    else:
        text = "CPU"

    if processors > 1:
        text += f" ({processors})"
    if ghz > 0:
        text += f" @ {ghz:.9g}GHz"
    return text


def _freq_paths(root: Path, filename: str) -> tuple[Path, Path]:
    base = root / "sys/devices/system/cpu"
    return base / "cpufreq/policy0" / filename, base / "cpu0/cpufreq" / filename


def detect_cpu(root: str | Path = "/") -> str:
    """Detect the processor below ``root`` and return its description."""
    root = Path(root)
    cpuinfo_path = root / "proc/cpuinfo"
    try:
        text = cpuinfo_path.read_text(errors="replace")
    except OSError as exc:
        raise ModuleError(MODULE_NAME, f'cannot open "{cpuinfo_path}"') from exc

    info = parse_cpuinfo(text)

    bios_limit = read_ghz(*_freq_paths(root, "bios_limit"))
    scaling_max = read_ghz(*_freq_paths(root, "scaling_max_freq"))
    scaling_min = read_ghz(*_freq_paths(root, "scaling_min_freq"))
    info_max = read_ghz(*_freq_paths(root, "cpuinfo_max_freq"))
    info_min = read_ghz(*_freq_paths(root, "cpuinfo_min_freq"))

    online = os.cpu_count() or 1
    available = os.cpu_count() or 1

    processors = online
    if processors <= 1:
        processors = available
    if processors <= 1:
        processors = info.physical_cores

    ghz = next(
        (value for value in (bios_limit, scaling_max, info_max, info.proc_ghz, scaling_min, info_min) if value != 0),
        0.0,
    )

    if not info.name and not info.vendor and processors <= 1 and ghz <= 0:
        raise ModuleError(MODULE_NAME, "No CPU info found in /proc/cpuinfo")

    return format_cpu(info.name, info.vendor, processors, ghz)