from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class BookingStatus(str, Enum):
    pending = "pending"
    accepted = "accepted"
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"


# Statuses that occupy a provider's time on the calendar
ACTIVE_BOOKING_STATUSES = frozenset({BookingStatus.pending, BookingStatus.accepted})


@dataclass(frozen=True)
class BookingRecord:
    provider_id: str
    status: BookingStatus
    date: datetime
    booking_id: str | None = None


@dataclass(frozen=True)
class MarkedDateInfo:
    marked: bool
    dot_color: str
