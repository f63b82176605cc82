"""Kernel release and process count of the running system."""

from __future__ import annotations

import platform

import psutil

__all__ = ["kernel_release", "process_count"]


def kernel_release() -> str:
    """The release string of the running kernel."""
    return platform.release()


def process_count() -> int:
    """The number of processes currently running."""
    return len(psutil.pids())