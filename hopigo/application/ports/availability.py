from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from hopigo.domain.entities.availability import AvailabilitySlot


class AvailabilityPort(ABC):
    @abstractmethod
    async def fetch_availability(self, provider_id: str, day: date) -> list[AvailabilitySlot]:
        """
        Fetch bookable time slots for a provider on a given date.

        Requirements:
        - Return slots in the order the source lists them; do not filter unavailable ones
        - Return an empty list if the provider has no slots configured for the date

        Raises:
            AvailabilityUpstreamError: networking/backend failures
            AvailabilityContractError: malformed response payload
        """
        raise NotImplementedError
