from __future__ import annotations

import threading
from typing import Iterable

from hopigo.application.ports.booking_store import BookingStorePort
from hopigo.domain.entities.booking import BookingRecord


class MemoryBookingStore(BookingStorePort):
    def __init__(self, bookings: Iterable[BookingRecord] = ()) -> None:
        self._bookings: list[BookingRecord] = list(bookings)
        self._lock = threading.Lock()

    def list_bookings(self, provider_id: str | None = None) -> list[BookingRecord]:
        with self._lock:
            if provider_id is None:
                return list(self._bookings)
            return [b for b in self._bookings if b.provider_id == provider_id]

    def add_booking(self, booking: BookingRecord) -> None:
        with self._lock:
            self._bookings.append(booking)
