import pytest

from infofetch.uptime import format_uptime, split_uptime


@pytest.mark.parametrize("seconds", [0, 59, 60, 3599, 3600, 86399, 86400, 90061, 9_000_000])
def test_split_round_trip(seconds):
    days, hours, minutes, secs = split_uptime(seconds)
    assert days * 86400 + hours * 3600 + minutes * 60 + secs == seconds
    assert 0 <= hours < 24 and 0 <= minutes < 60 and 0 <= secs < 60


def test_split_negative_raises():
    with pytest.raises(ValueError):
        split_uptime(-1)


def test_seconds_only_below_a_minute():
    assert format_uptime(59) == "59 seconds"


def test_one_day_exact():
    assert format_uptime(86400) == "1 day"


def test_mixed_units():
    assert format_uptime(2 * 86400 + 3600 + 120 + 5) == "2 days, 1 hour, 2 mins"


def test_long_uptime_marker():
    text = format_uptime(100 * 86400)
    assert text.startswith("100 days")
    assert text.endswith("(!)")


def test_seconds_dropped_once_minutes_present():
    text = format_uptime(61)
    assert "second" not in text
    assert text.startswith("1 min")
    assert "," not in text


def test_no_separator_after_days_alone():
    text = format_uptime(3 * 86400 + 30)
    assert "," not in text
    assert "hour" not in text