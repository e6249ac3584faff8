from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from hopigo.domain.entities.availability import AvailabilitySlot

WEEK_DAYS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkingHours:
    days: tuple[str, ...]  # three-letter lowercase names, e.g. ("mon", "tue")
    start_hour: int
    end_hour: int


DEFAULT_WORKING_HOURS = (WorkingHours(days=WEEK_DAYS[:5], start_hour=9, end_hour=17),)

_HOUR_RE = re.compile(r"^\s*(\d{1,2})(?::\d{2})?\s*(am|pm)?\s*$", re.IGNORECASE)


def _parse_hour(text: str) -> int:
    match = _HOUR_RE.match(text)
    if not match:
        raise ValueError(f"Unrecognised hour: {text!r}")
    hour = int(match.group(1))
    meridiem = (match.group(2) or "").lower()
    if hour > 23 or (meridiem and hour > 12):
        raise ValueError(f"Hour out of range: {text!r}")
    if meridiem == "pm" and hour != 12:
        return hour + 12
    if meridiem == "am" and hour == 12:
        return 0
    return hour


def _parse_days(text: str) -> tuple[str, ...]:
    normalized = text.strip().lower()
    if normalized == "daily":
        return WEEK_DAYS
    if "-" in normalized:
        start_name, end_name = (part.strip()[:3] for part in normalized.split("-", 1))
        if start_name in WEEK_DAYS and end_name in WEEK_DAYS:
            return WEEK_DAYS[WEEK_DAYS.index(start_name) : WEEK_DAYS.index(end_name) + 1]
        return ()
    return (normalized[:3],)


def parse_working_hours(text: str) -> tuple[WorkingHours, ...]:
    """
    Parse a provider's working-hours string.

    Accepts comma-separated ranges such as "Mon-Sat: 8AM-6PM, Sun: 10AM-2PM"
    or "Daily: 7AM-7PM". Falls back to Mon-Fri 9-17 when the string can't be read.
    """
    ranges: list[WorkingHours] = []
    try:
        for part in text.split(","):
            if not part.strip():
                continue
            days_text, hours_text = part.split(":", 1)
            start_text, end_text = hours_text.split("-", 1)
            ranges.append(
                WorkingHours(
                    days=_parse_days(days_text),
                    start_hour=_parse_hour(start_text),
                    end_hour=_parse_hour(end_text),
                )
            )
    except (ValueError, AttributeError) as e:
        logger.warning("Unparseable working hours, using default", extra={"error": str(e)})
        return DEFAULT_WORKING_HOURS
    return tuple(ranges)


def working_hours_for(ranges: tuple[WorkingHours, ...], day: date) -> WorkingHours | None:
    name = WEEK_DAYS[day.weekday()]
    for hours in ranges:
        if name in hours.days:
            return hours
    return None


def hourly_slots(
    day: date,
    hours: WorkingHours,
    booked_hours: set[int] | frozenset[int] = frozenset(),
    tzinfo=None,
) -> list[AvailabilitySlot]:
    """One-hour slots from start_hour up to end_hour; booked hours are marked unavailable."""
    slots: list[AvailabilitySlot] = []
    for hour in range(hours.start_hour, hours.end_hour):
        start = datetime.combine(day, time(hour=hour), tzinfo=tzinfo)
        slots.append(
            AvailabilitySlot(
                start_time=start,
                end_time=start + timedelta(hours=1),
                available=hour not in booked_hours,
            )
        )
    return slots
