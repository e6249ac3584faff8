from __future__ import annotations

from typing import Iterable

from hopigo.application.utils.month_grid import format_date_key
from hopigo.domain.entities.booking import (
    ACTIVE_BOOKING_STATUSES,
    BookingRecord,
    BookingStatus,
    MarkedDateInfo,
)

PRIMARY_DOT_COLOR = "#2196F3"
WARNING_DOT_COLOR = "#FFC107"


def build_marked_dates(
    bookings: Iterable[BookingRecord],
    provider_id: str,
    primary_color: str = PRIMARY_DOT_COLOR,
    warning_color: str = WARNING_DOT_COLOR,
) -> dict[str, MarkedDateInfo]:
    """
    Mark calendar dates holding a pending or accepted booking for the provider.

    Accepted bookings get the primary dot, pending ones the warning dot. A date
    with both keeps the primary dot.
    """
    marked: dict[str, MarkedDateInfo] = {}
    for booking in bookings:
        if booking.provider_id != provider_id:
            continue
        if BookingStatus(booking.status) not in ACTIVE_BOOKING_STATUSES:
            continue

        key = format_date_key(booking.date)
        if booking.status == BookingStatus.accepted:
            marked[key] = MarkedDateInfo(marked=True, dot_color=primary_color)
        elif key not in marked:
            marked[key] = MarkedDateInfo(marked=True, dot_color=warning_color)
    return marked
