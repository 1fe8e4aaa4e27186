"""Tests for reset-duration parsing."""

from modcheck.ratelimit import parse_duration, parse_duration_strict


def test_seconds_minutes_hours():
    assert parse_duration("30s") == 30_000
    assert parse_duration("45s") == 45_000
    assert parse_duration("2m") == 120_000
    assert parse_duration("1h") == 3_600_000


def test_unparseable_is_zero():
    assert parse_duration("") == 0
    assert parse_duration("abc") == 0
    assert parse_duration("5x") == 0
    assert parse_duration(None) == 0


def test_zero_duration():
    assert parse_duration("0s") == 0
    assert parse_duration_strict("0s") == 0


def test_first_match_wins():
    # Compound service values such as "1m30s" only count their first unit.
    assert parse_duration("1m30s") == 60_000


def test_strict_distinguishes_failure():
    assert parse_duration_strict("30s") == 30_000
    assert parse_duration_strict("") is None
    assert parse_duration_strict("abc") is None
    assert parse_duration_strict("5x") is None


def test_non_ascii_digits_are_rejected():
    assert parse_duration("３０s") == 0
    assert parse_duration("٣s") == 0
    assert parse_duration_strict("３０s") is None
