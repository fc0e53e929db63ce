"""Tests for formatting.py."""

from tempo_practice.formatting import format_error_rate, format_seconds, format_time


def test_under_a_minute():
    assert format_time(0) == "0:00"
    assert format_time(59.99) == "0:59"


def test_minutes():
    assert format_time(118.0623377) == "1:58"
    assert format_time(600) == "10:00"


def test_hours():
    assert format_time(3600) == "1:00:00"
    assert format_time(3725.9) == "1:02:05"
    assert format_time(36000 + 61) == "10:01:01"


def test_seconds_text():
    assert format_seconds(118.0623377) == "118.06 s"
    assert format_seconds(118.0623377, 4) == "118.0623 s"


def test_error_rate_sign():
    assert format_error_rate(1.34227) == "+1.3423%"
    assert format_error_rate(0.0) == "+0.0000%"
    assert format_error_rate(-2.94) == "-2.9400%"
