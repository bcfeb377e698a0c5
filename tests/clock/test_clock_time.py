from __future__ import annotations

import dataclasses
from datetime import date, datetime

import pytest

from src.timesheet_system.timesheet_system.clock.model import (
    ClockTime,
    InvalidTime,
    ValidTime,
    coerce_clock_time,
    parse_clock_time,
)
from src.timesheet_system.timesheet_system.core.exceptions import InvalidTimeError, ValidationError


def test_minutes_match_components_for_every_time_of_day():
    for h in range(24):
        for m in range(60):
            t = ClockTime(h, m)
            assert t.to_minutes() == h * 60 + m
            assert ClockTime.from_minutes(h * 60 + m) == t


def test_from_minutes_wraps_past_midnight():
    assert ClockTime.from_minutes(1500) == ClockTime(1, 0)
    assert ClockTime.from_minutes(1440) == ClockTime(0, 0)
    assert ClockTime.from_minutes(10 * 1440 + 59).to_tuple() == (0, 59)


def test_add_wraps_to_next_day():
    assert ClockTime(23, 30).add(ClockTime(1, 0)) == ClockTime(0, 30)
    assert ClockTime(9, 45).add(ClockTime(0, 30)) == ClockTime(10, 15)


def test_subtract_wraps_negative_difference():
    assert ClockTime(0, 30).subtract(ClockTime(1, 0)) == ClockTime(23, 30)
    assert ClockTime(17, 0).subtract(ClockTime(9, 0)) == ClockTime(8, 0)


@pytest.mark.parametrize("hours, minutes", [(24, 0), (-1, 0), (0, 60), (0, -5), ("ab", 0), (0, "1x"), (1.5, 0)])
def test_invalid_components_raise(hours, minutes):
    with pytest.raises(InvalidTimeError):
        ClockTime(hours, minutes)


@pytest.mark.parametrize("value", ["9-30", "9:", ":30", "09:30:00", "", "ab:cd", "24:00"])
def test_from_string_rejects_malformed(value):
    with pytest.raises(InvalidTimeError):
        ClockTime.from_string(value)


def test_invalid_time_is_a_validation_error():
    assert issubclass(InvalidTimeError, ValidationError)


def test_strings_are_parsed_and_blank_means_unset():
    assert ClockTime("9", " 30 ") == ClockTime(9, 30)
    assert ClockTime.from_string("09:05") == ClockTime(9, 5)
    assert ClockTime("", "") == ClockTime(None, None)
    assert ClockTime("8", "").to_tuple() == (8, None)


def test_empty_is_distinct_from_midnight():
    assert ClockTime().is_empty()
    assert not ClockTime(0, 0).is_empty()
    assert not ClockTime(None, 0).is_empty()
    assert ClockTime() != ClockTime(0, 0)


def test_unset_components_count_as_zero():
    t = ClockTime(None, 15)
    assert t.to_minutes() == 15
    assert str(t) == "00:15"
    assert str(ClockTime()) == "00:00"
    assert t.to_datetime(date(2025, 3, 5)) == datetime(2025, 3, 5, 0, 15)


def test_to_string_and_hours():
    assert str(ClockTime(9, 5)) == "09:05"
    assert ClockTime(7, 30).to_hours() == 7.5


def test_to_datetime_uses_midnight_of_day():
    assert ClockTime(17, 45).to_datetime(datetime(2025, 3, 5, 13, 10)) == datetime(2025, 3, 5, 17, 45)


def test_now_uses_injected_clock(fixed_now):
    assert ClockTime.now(clock=lambda: fixed_now) == ClockTime(8, 45)
    assert ClockTime.from_datetime(datetime(2025, 1, 1, 23, 59)) == ClockTime(23, 59)


def test_from_mapping():
    assert ClockTime.from_mapping({"hours": "8", "minutes": "15"}) == ClockTime(8, 15)
    with pytest.raises(InvalidTimeError):
        ClockTime.from_mapping({"hours": "8", "minutes": "75"})


def test_is_immutable():
    t = ClockTime(9, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.hours = 10


def test_parse_clock_time_returns_tagged_result():
    ok = parse_clock_time("08:30")
    assert isinstance(ok, ValidTime) and ok.ok
    assert ok.time == ClockTime(8, 30)

    bad = parse_clock_time("25:00")
    assert isinstance(bad, InvalidTime) and not bad.ok
    assert bad.message == "hours must be between 0 and 23"

    assert parse_clock_time(None).time.is_empty()
    assert parse_clock_time({"hours": "8", "minutes": ""}).time == ClockTime(8, None)
    assert isinstance(parse_clock_time(3.5), InvalidTime)


def test_coerce_passes_clock_time_through():
    t = ClockTime(6, 0)
    assert coerce_clock_time(t) is t
