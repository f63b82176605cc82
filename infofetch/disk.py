"""Disk usage of the root and home file systems or of chosen folders."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .custom import Entry, ModuleError
from .strbuf import trim

__all__ = [
    "DiskUsage",
    "usage_from_statvfs",
    "disk_key",
    "split_folders",
    "format_disk",
    "detect_disks",
]

MODULE_NAME = "Disk"
GB = 1024 * 1024 * 1024


@dataclass(frozen=True)
class DiskUsage:
    """Used and total space in GiB, and the number of used inodes."""

    used_gb: int
    total_gb: int
    files: int

    @property
    def percentage(self) -> int:
        if self.total_gb == 0:
            return 0
        return int(self.used_gb / self.total_gb * 100)


def usage_from_statvfs(stat: Any) -> DiskUsage:
    """Build a DiskUsage from an ``os.statvfs`` result."""
    total = stat.f_blocks * stat.f_frsize // GB
    available = stat.f_bfree * stat.f_frsize // GB
    return DiskUsage(used_gb=total - available, total_gb=total, files=stat.f_files - stat.f_ffree)


def disk_key(folder: str, show_folder: bool = True) -> str:
    """The key shown for a folder."""
    return f"{MODULE_NAME} ({folder})" if show_folder else MODULE_NAME


def split_folders(spec: str) -> list[str]:
    """Split a colon-separated folder list, ignoring leading and trailing colons."""
    spec = trim(spec, ":")
    if not spec:
        raise ModuleError(disk_key("", False), "Custom disk folders string doesn't contain any folders")
    return spec.split(":")


def format_disk(usage: DiskUsage) -> str:
    """The default disk line."""
    return f"{usage.used_gb}GB / {usage.total_gb}GB ({usage.percentage}%)"


def _entry(folder: str, stat: Any) -> Entry:
    return Entry(disk_key(folder), format_disk(usage_from_statvfs(stat)))


def detect_disks(folders: str | list[str] | None = None) -> list[Entry | ModuleError]:
    """Report disk usage.

    Without folders, the root file system and the home directory's are shown,
    the latter only if it is a different file system. With folders (a list or
    a colon-separated string) each is shown in turn; a folder that cannot be
    examined yields a ModuleError in its place.
    """
    if not folders:
        home = str(Path.home())
        try:
            root_stat = os.statvfs("/")
        except OSError:
            root_stat = None
        try:
            home_stat = os.statvfs(home)
        except OSError:
            home_stat = None

        if root_stat is None and home_stat is None:
            raise ModuleError(disk_key("", False), f"statvfs failed for both / and {home}")

        results: list[Entry | ModuleError] = []
        if root_stat is not None:
            results.append(_entry("/", root_stat))
        if home_stat is not None and (root_stat is None or root_stat.f_fsid != home_stat.f_fsid):
            results.append(_entry(home, home_stat))
        return results

    folder_list = split_folders(folders) if isinstance(folders, str) else list(folders)
    results = []
    for folder in folder_list:
        try:
            results.append(_entry(folder, os.statvfs(folder)))
        except OSError as exc:
            results.append(ModuleError(disk_key(folder), f'statvfs("{folder}") failed: {exc.strerror}'))
    return results