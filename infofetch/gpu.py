"""Graphics card naming."""

from __future__ import annotations

from .custom import ModuleError
from .strbuf import equals_ignore_case, substr_after_first, substr_before_last

__all__ = ["vendor_pretty", "name_pretty", "format_gpu", "gpu_indices"]

MODULE_NAME = "GPU"

_VENDOR_NAMES = (
    ("Advanced Micro Devices, Inc. [AMD/ATI]", "AMD ATI"),
    ("NVIDIA Corporation", "Nvidia"),
    ("Intel Corporation", "Intel"),
)


def vendor_pretty(vendor: str) -> str:
    """A short name for the well-known vendors; other vendors unchanged."""
    return next(
        (short for full, short in _VENDOR_NAMES if equals_ignore_case(vendor, full)),
        vendor,
    )


def name_pretty(name: str) -> str:
    """The marketing name inside the outermost brackets, if there are any."""
    return substr_after_first(substr_before_last(name, "]"), "[")


def format_gpu(vendor: str, name: str) -> str:
    """The default GPU line: short vendor name followed by the pretty device name."""
    short = vendor_pretty(vendor)
    pretty = name_pretty(name)
    return f"{short} {pretty}" if short else pretty


def gpu_indices(count: int) -> list[int]:
    """Key indices for ``count`` GPUs: 0 for a single one, else numbered from 1."""
    if count <= 0:
        raise ModuleError(MODULE_NAME, "No GPUs found.")
    if count == 1:
        return [0]
    return list(range(1, count + 1))