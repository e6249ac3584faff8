from __future__ import annotations

import logging
from datetime import date

from hopigo.application.ports.availability import AvailabilityPort
from hopigo.application.ports.booking_store import BookingStorePort
from hopigo.application.ports.provider_directory import ProviderDirectoryPort
from hopigo.application.utils.month_grid import format_date_key
from hopigo.application.utils.working_hours import hourly_slots, parse_working_hours, working_hours_for
from hopigo.domain.entities.availability import AvailabilitySlot
from hopigo.domain.entities.booking import ACTIVE_BOOKING_STATUSES, BookingStatus


class ScheduleAvailability(AvailabilityPort):
    """Hourly slots from each provider's working hours, minus hours already booked."""

    def __init__(self, directory: ProviderDirectoryPort, bookings: BookingStorePort) -> None:
        self._directory = directory
        self._bookings = bookings
        self._logger = logging.getLogger(__name__)

    async def fetch_availability(self, provider_id: str, day: date) -> list[AvailabilitySlot]:
        provider = self._directory.get_provider(provider_id)
        if provider is None:
            self._logger.warning("Provider not found", extra={"provider_id": provider_id})
            return []

        hours = working_hours_for(parse_working_hours(provider.availability), day)
        if hours is None:
            return []

        booked_hours = {
            booking.date.hour
            for booking in self._bookings.list_bookings(provider_id)
            if booking.date.date() == day and BookingStatus(booking.status) in ACTIVE_BOOKING_STATUSES
        }
        slots = hourly_slots(day, hours, booked_hours)
        self._logger.debug(
            "Schedule slots built",
            extra={"provider_id": provider_id, "date": format_date_key(day), "slot_count": len(slots)},
        )
        return slots
