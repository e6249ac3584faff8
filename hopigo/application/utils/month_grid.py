from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

from hopigo.domain.entities.month_grid import MonthGrid

WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def to_calendar_date(value: date | datetime) -> date:
    """Truncate a datetime to its calendar date. Dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


def _sunday_based_weekday(day: date) -> int:
    # Sunday=0 ... Saturday=6
    return (day.weekday() + 1) % 7


def first_of_month(reference_month: date | datetime) -> date:
    return to_calendar_date(reference_month).replace(day=1)


def last_of_month(reference_month: date | datetime) -> date:
    first = first_of_month(reference_month)
    return first.replace(day=calendar.monthrange(first.year, first.month)[1])


def generate_grid(reference_month: date | datetime) -> MonthGrid:
    """
    Build the cells of a month view.

    The grid starts on the Sunday on/before the 1st and ends on the Saturday
    on/after the last day, so it always holds whole weeks.
    """
    first = first_of_month(reference_month)
    last = last_of_month(reference_month)

    start = first - timedelta(days=_sunday_based_weekday(first))
    end = last + timedelta(days=6 - _sunday_based_weekday(last))

    days: list[date] = []
    current = start
    while current <= end:
        days.append(current)
        current += timedelta(days=1)

    return MonthGrid(month=first, days=tuple(days))


def is_in_current_month(day: date | datetime, reference_month: date | datetime) -> bool:
    d = to_calendar_date(day)
    ref = to_calendar_date(reference_month)
    return d.year == ref.year and d.month == ref.month


def is_today(day: date | datetime, today: date | None = None) -> bool:
    """Compare against the process-local wall-clock date unless `today` is given."""
    if today is None:
        today = date.today()
    return to_calendar_date(day) == to_calendar_date(today)


def is_selectable(
    day: date | datetime,
    min_date: date | datetime | None = None,
    max_date: date | datetime | None = None,
) -> bool:
    d = to_calendar_date(day)
    if min_date is not None and d < to_calendar_date(min_date):
        return False
    if max_date is not None and d > to_calendar_date(max_date):
        return False
    return True


def advance_month(reference_month: date | datetime, delta: int) -> date:
    """Move by whole months. Returns the first of the target month."""
    ref = to_calendar_date(reference_month)
    index = ref.year * 12 + (ref.month - 1) + delta
    return date(index // 12, index % 12 + 1, 1)


def add_months_clamped(day: date | datetime, months: int) -> date:
    """Same day-of-month `months` later, clamped to the end of a shorter month."""
    d = to_calendar_date(day)
    target = advance_month(d, months)
    last_day = calendar.monthrange(target.year, target.month)[1]
    return target.replace(day=min(d.day, last_day))


def booking_window(today: date | datetime | None = None, months_ahead: int = 3) -> tuple[date, date]:
    """Return (min_date, max_date) for bookable days: today through `months_ahead` months out."""
    start = to_calendar_date(today) if today is not None else date.today()
    return start, add_months_clamped(start, months_ahead)


def format_date_key(day: date | datetime) -> str:
    return to_calendar_date(day).isoformat()


def parse_date_key(value: str) -> date:
    """Parse YYYY-MM-DD. Raises ValueError on anything else."""
    return date.fromisoformat(value.strip())


def month_title(reference_month: date | datetime) -> str:
    ref = to_calendar_date(reference_month)
    return f"{calendar.month_name[ref.month]} {ref.year}"
