"""Counting installed packages of the common package managers."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, fields
from pathlib import Path

from .custom import ModuleError

__all__ = [
    "PackageCounts",
    "count_entries",
    "count_matching_lines",
    "count_files_recursive",
    "detect_packages",
]

MODULE_NAME = "Packages"


def count_entries(dirname: str | Path, want_dirs: bool) -> int:
    """Count subdirectories (or regular files) directly inside ``dirname``.

    A missing directory counts as empty.
    """
    try:
        with os.scandir(dirname) as entries:
            if want_dirs:
                return sum(1 for entry in entries if entry.is_dir(follow_symlinks=False))
            return sum(1 for entry in entries if entry.is_file(follow_symlinks=False))
    except OSError:
        return 0


def count_matching_lines(filename: str | Path, needle: str) -> int:
    """Count the lines of a file that contain ``needle``; 0 if unreadable."""
    try:
        with open(filename, encoding="utf-8", errors="replace") as file:
            return sum(1 for line in file if needle in line)
    except OSError:
        return 0


def count_files_recursive(base_dir: str | Path, filename: str) -> int:
    """Count directories below ``base_dir`` that hold a regular file ``filename``.

    Descent stops at a directory holding the file; hidden directories are skipped.
    """
    base = Path(base_dir)
    if (base / filename).is_file():
        return 1
    try:
        with os.scandir(base) as entries:
            subdirs = [
                entry.path
                for entry in entries
                if entry.is_dir(follow_symlinks=False) and not entry.name.startswith(".")
            ]
    except OSError:
        return 0
    return sum(count_files_recursive(path, filename) for path in subdirs)


_LABELS = {
    "pacman": "pacman",
    "dpkg": "dpkg",
    "rpm": "rpm",
    "emerge": "emerge",
    "nix_user": "nix-user",
    "nix_default": "nix-default",
    "flatpak": "flatpak",
    "snap": "snap",
}


@dataclass(frozen=True)
class PackageCounts:
    """Number of packages per package manager."""

    pacman: int = 0
    dpkg: int = 0
    rpm: int = 0
    emerge: int = 0
    xbps: int = 0
    nix_user: int = 0
    nix_default: int = 0
    flatpak: int = 0
    snap: int = 0

    def total(self) -> int:
        """Sum over all package managers."""
        return sum(getattr(self, field.name) for field in fields(self))

    def describe(self, branch: str = "") -> str:
        """The default packages line, e.g. ``12 (pacman)[stable], 3 (flatpak)``."""
        parts = []
        for attr, label in _LABELS.items():
            count = getattr(self, attr)
            if not count:
                continue
            part = f"{count} ({label})"
            if attr == "pacman" and branch:
                part += f"[{branch}]"
            parts.append(part)
        return ", ".join(parts)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _prop_file(path: Path, key: str) -> str | None:
    """Value of ``key = value`` in a file; None if the file cannot be read."""
    try:
        text = path.read_text(errors="replace")
    except OSError:
        return None
    pattern = re.compile(r"^\s*" + re.escape(key) + r"\s*=\s*(.*?)\s*$")
    for line in text.splitlines():
        match = pattern.match(line)
        if match:
            return _unquote(match.group(1))
    return ""


def detect_packages(root: str | Path = "/") -> str:
    """Count packages found below ``root`` and return the packages line.

    Raises ModuleError if no package manager reports any package.
    """
    root = Path(root)
    snap = count_entries(root / "snap", True)
    if snap > 0:
        snap -= 1  # the snap/bin folder

    counts = PackageCounts(
        pacman=count_entries(root / "var/lib/pacman/local", True),
        dpkg=count_matching_lines(root / "var/lib/dpkg/status", "Status: "),
        emerge=count_files_recursive(root / "var/db/pkg", "SIZE"),
        xbps=count_entries(root / "var/db/xbps", False),
        flatpak=count_entries(root / "var/lib/flatpak/app", True),
        snap=snap,
    )

    if counts.total() == 0:
        raise ModuleError(MODULE_NAME, "No packages from known package managers found")

    branch = _prop_file(root / "etc/pacman-mirrors.conf", "Branch")
    if branch == "":
        branch = "stable"
    return counts.describe(branch or "")