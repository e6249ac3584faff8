"""
Tests for provider working-hours parsing and hourly slot generation.
"""

from __future__ import annotations

import time
from datetime import date, datetime, timezone

import pytest

from hopigo.application.utils.slot_format import format_selected_time, format_slot_time
from hopigo.application.utils.working_hours import (
    DEFAULT_WORKING_HOURS,
    WEEK_DAYS,
    WorkingHours,
    hourly_slots,
    parse_working_hours,
    working_hours_for,
)

TUESDAY = date(2025, 6, 10)
SUNDAY = date(2025, 6, 8)


def test_parse_day_range():
    (hours,) = parse_working_hours("Mon-Sat: 8AM-6PM")
    assert hours.days == ("mon", "tue", "wed", "thu", "fri", "sat")
    assert hours.start_hour == 8
    assert hours.end_hour == 18


def test_parse_daily():
    (hours,) = parse_working_hours("Daily: 7AM-7PM")
    assert hours.days == WEEK_DAYS
    assert (hours.start_hour, hours.end_hour) == (7, 19)


def test_parse_multiple_ranges():
    ranges = parse_working_hours("Mon-Fri: 9AM-12PM, Saturday: 10AM-2PM")
    assert len(ranges) == 2
    assert ranges[0].end_hour == 12
    assert ranges[1].days == ("sat",)
    assert (ranges[1].start_hour, ranges[1].end_hour) == (10, 14)


def test_midnight_is_hour_zero():
    (hours,) = parse_working_hours("Sun: 12AM-6AM")
    assert hours.start_hour == 0
    assert hours.end_hour == 6


def test_unreadable_string_falls_back_to_weekday_office_hours():
    assert parse_working_hours("by appointment") == DEFAULT_WORKING_HOURS
    assert parse_working_hours("Mon-Fri: 25PM-6PM") == DEFAULT_WORKING_HOURS


def test_working_hours_for_picks_first_matching_range():
    ranges = parse_working_hours("Mon-Sat: 8AM-6PM")
    assert working_hours_for(ranges, TUESDAY) == ranges[0]
    assert working_hours_for(ranges, SUNDAY) is None


def test_hourly_slots_mark_booked_hours():
    slots = hourly_slots(TUESDAY, WorkingHours(days=("tue",), start_hour=8, end_hour=12), booked_hours={10})

    assert [s.start_time.hour for s in slots] == [8, 9, 10, 11]
    assert [s.available for s in slots] == [True, True, False, True]
    assert slots[0].end_time == datetime(2025, 6, 10, 9, 0)


def test_slot_labels():
    assert format_slot_time(datetime(2025, 6, 10, 9, 0)) == "9:00 AM"
    assert format_slot_time(datetime(2025, 6, 10, 12, 30)) == "12:30 PM"
    assert format_slot_time(datetime(2025, 6, 10, 0, 15)) == "12:15 AM"
    assert format_selected_time(datetime(2025, 6, 10, 15, 0)) == "Tuesday, June 10, 03:00 PM"


@pytest.fixture
def new_york_tz(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "EST+5EDT,M3.2.0,M11.1.0")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_utc_slot_labels_render_in_local_time(new_york_tz):
    morning = datetime(2025, 6, 10, 13, 0, tzinfo=timezone.utc)
    late = datetime(2025, 6, 11, 2, 0, tzinfo=timezone.utc)

    assert format_slot_time(morning) == "9:00 AM"
    assert format_selected_time(morning) == "Tuesday, June 10, 09:00 AM"
    # Local date is still the 10th
    assert format_selected_time(late) == "Tuesday, June 10, 10:00 PM"
