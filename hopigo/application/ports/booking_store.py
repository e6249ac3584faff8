from __future__ import annotations

from abc import ABC, abstractmethod

from hopigo.domain.entities.booking import BookingRecord


class BookingStorePort(ABC):
    @abstractmethod
    def list_bookings(self, provider_id: str | None = None) -> list[BookingRecord]:
        """List existing bookings, optionally only those for one provider."""
        raise NotImplementedError

    @abstractmethod
    def add_booking(self, booking: BookingRecord) -> None:
        raise NotImplementedError
