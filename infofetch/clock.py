"""Date and time lines."""

from __future__ import annotations

from datetime import datetime

__all__ = ["format_date", "format_time", "format_datetime"]

DATE_MODULE_NAME = "Date"
TIME_MODULE_NAME = "Time"
DATETIME_MODULE_NAME = "Date & Time"


def _resolve(moment: datetime | None) -> datetime:
    return datetime.now() if moment is None else moment


def format_date(moment: datetime | None = None) -> str:
    """``year-month-day``; the month has two digits, the day is not padded."""
    moment = _resolve(moment)
    return f"{moment.year}-{moment.month:02d}-{moment.day}"


def format_time(moment: datetime | None = None) -> str:
    """``hh:mm:ss`` with every part padded to two digits."""
    moment = _resolve(moment)
    return f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"


def format_datetime(moment: datetime | None = None) -> str:
    """The date followed by the time, separated by a space."""
    moment = _resolve(moment)
    return f"{format_date(moment)} {format_time(moment)}"