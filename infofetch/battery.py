"""Battery detection from the kernel's power-supply class directory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .custom import ModuleError
from .strbuf import equals_ignore_case

__all__ = ["Battery", "read_battery", "read_batteries", "format_battery", "DEFAULT_BASE_DIR"]

MODULE_NAME = "Battery"
DEFAULT_BASE_DIR = "/sys/class/power_supply/"


@dataclass(frozen=True)
class Battery:
    """Values read from one power-supply directory that is a battery."""

    capacity: str
    manufacturer: str = ""
    model_name: str = ""
    technology: str = ""
    status: str = ""


def _read_value(path: Path) -> str:
    try:
        return path.read_text(errors="replace").rstrip("\n")
    except OSError:
        return ""


def read_battery(path: str | Path) -> Battery | None:
    """Read a power-supply directory, or return None if it is not a system battery."""
    directory = Path(path)

    if not equals_ignore_case(_read_value(directory / "type"), "Battery"):
        return None

    # A scope of "Device" marks batteries of peripherals such as mice.
    if equals_ignore_case(_read_value(directory / "scope"), "Device"):
        return None

    capacity = _read_value(directory / "capacity")
    if not capacity:
        return None

    return Battery(
        capacity=capacity,
        manufacturer=_read_value(directory / "manufacturer"),
        model_name=_read_value(directory / "model_name"),
        technology=_read_value(directory / "technology"),
        status=_read_value(directory / "status"),
    )


def read_batteries(base_dir: str | Path | None = None) -> list[Battery]:
    """Read every battery below ``base_dir``.

    Raises ModuleError if the directory cannot be listed or holds no battery.
    """
    base = str(base_dir) if base_dir else DEFAULT_BASE_DIR
    if not base.endswith("/"):
        base += "/"

    try:
        names = sorted(entry.name for entry in Path(base).iterdir())
    except OSError as exc:
        raise ModuleError(MODULE_NAME, f'cannot open directory "{base}"') from exc

    batteries = [battery for name in names if (battery := read_battery(Path(base) / name))]
    if not batteries:
        raise ModuleError(MODULE_NAME, f"{base} doesn't contain any battery folder")
    return batteries


def format_battery(battery: Battery) -> str:
    """The default text for a battery: capacity with a percent sign and status."""
    show_status = bool(battery.status) and not equals_ignore_case(battery.status, "Unknown")

    if battery.capacity and show_status:
        return f"{battery.capacity}% [{battery.status}]"
    if battery.capacity:
        return f"{battery.capacity}%"
    if show_status:
        return battery.status
    return ""