from __future__ import annotations

from datetime import datetime, timedelta

from hopigo.domain.entities.booking import BookingRecord, BookingStatus


def _at(now: datetime, days: int, hour: int) -> datetime:
    return (now + timedelta(days=days)).replace(hour=hour, minute=0, second=0, microsecond=0)


def build_seed_bookings(now: datetime | None = None) -> list[BookingRecord]:
    """Demo bookings around `now` for local development."""
    now = now or datetime.now()
    return [
        BookingRecord(booking_id="booking1", provider_id="1", status=BookingStatus.completed, date=_at(now, -2, 14)),
        BookingRecord(booking_id="booking2", provider_id="4", status=BookingStatus.accepted, date=_at(now, 1, 10)),
        BookingRecord(booking_id="booking3", provider_id="2", status=BookingStatus.pending, date=_at(now, 2, 16)),
        BookingRecord(booking_id="booking4", provider_id="5", status=BookingStatus.cancelled, date=_at(now, 0, 13)),
        BookingRecord(booking_id="booking5", provider_id="1", status=BookingStatus.accepted, date=_at(now, 3, 9)),
    ]
