"""Host model detection from the firmware's DMI tables."""

from __future__ import annotations

from pathlib import Path

from .custom import ModuleError
from .strbuf import starts_with_ignore_case, trim, trim_right

__all__ = ["clean_value", "is_meaningful", "build_host", "detect_host"]

MODULE_NAME = "Host"

_PLACEHOLDER_PREFIXES = ("To be filled", "To be set", "OEM", "O.E.M.")

_PLACEHOLDER_VALUES = frozenset(
    value.lower()
    for value in (
        "None",
        "System Product",
        "System Product Name",
        "System Product Version",
        "System Name",
        "System Version",
        "Default string",
        "Undefined",
        "Not Specified",
        "Not Applicable",
        "INVALID",
        "Type1ProductConfigId",
        "All Series",
    )
)


def clean_value(value: str) -> str:
    """Strip trailing newlines and surrounding spaces."""
    return trim(trim_right(value, "\n"), " ")


def is_meaningful(value: str) -> bool:
    """Whether a firmware value is real rather than a vendor placeholder."""
    value = clean_value(value)
    if not value:
        return False
    if any(starts_with_ignore_case(value, prefix) for prefix in _PLACEHOLDER_PREFIXES):
        return False
    return value.lower() not in _PLACEHOLDER_VALUES


def build_host(family: str, name: str, version: str) -> str:
    """Combine product family, name and version into the host description.

    Raises ModuleError if neither family nor name holds a real value.
    """
    if name.startswith("Standard PC"):
        name = "KVM/QEMU " + name

    family_set = is_meaningful(family)
    name_set = is_meaningful(name)
    version_set = is_meaningful(version)

    if not family_set and not name_set:
        raise ModuleError(MODULE_NAME, "neither family nor name is set by O.E.M.")

    host = clean_value(name) if name_set else clean_value(family)
    if version_set:
        host += " " + clean_value(version)
    return host


def _read(path: Path) -> str:
    try:
        return path.read_text(errors="replace").rstrip("\0")
    except OSError:
        return ""


def _first_content(root: Path, *relative: str) -> str:
    for rel in relative:
        content = _read(root / rel)
        if content:
            return content
    return ""


def detect_host(root: str | Path = "/") -> str:
    """Read the DMI product values below ``root`` and describe the host."""
    root = Path(root)
    family = _first_content(
        root,
        "sys/devices/virtual/dmi/id/product_family",
        "sys/class/dmi/id/product_family",
    )
    name = _first_content(
        root,
        "sys/devices/virtual/dmi/id/product_name",
        "sys/class/dmi/id/product_name",
        "sys/firmware/devicetree/base/model",
        "tmp/sysinfo/model",
    )
    version = _first_content(
        root,
        "sys/devices/virtual/dmi/id/product_version",
        "sys/class/dmi/id/product_version",
    )
    return build_host(family, name, version)