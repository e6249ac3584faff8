from __future__ import annotations

import calendar
from datetime import datetime


def _local(value: datetime) -> datetime:
    # Aware timestamps (e.g. "...Z" from the HTTP backend) render in the process's local time
    return value.astimezone() if value.tzinfo is not None else value


def _clock(value: datetime, pad_hour: bool = False) -> str:
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    hour_text = f"{hour:02d}" if pad_hour else str(hour)
    return f"{hour_text}:{value.minute:02d} {meridiem}"


def format_slot_time(start_time: datetime) -> str:
    """Slot button label, e.g. "9:00 AM"."""
    return _clock(_local(start_time))


def format_selected_time(start_time: datetime) -> str:
    """Summary line for a chosen slot, e.g. "Tuesday, June 10, 09:00 AM"."""
    local = _local(start_time)
    weekday = calendar.day_name[local.weekday()]
    month = calendar.month_name[local.month]
    return f"{weekday}, {month} {local.day}, {_clock(local, pad_hour=True)}"
