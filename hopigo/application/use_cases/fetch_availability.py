from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime

from hopigo.application.exceptions import AvailabilityContractError, AvailabilityUpstreamError
from hopigo.application.ports.availability import AvailabilityPort
from hopigo.application.utils.month_grid import format_date_key, to_calendar_date
from hopigo.domain.entities.availability import AvailabilitySlot


@dataclass(frozen=True)
class AvailabilityLookup:
    """Slots for one provider/date. On failure `slots` is empty and `failed` is set."""

    provider_id: str
    date: date
    slots: tuple[AvailabilitySlot, ...]
    failed: bool = False


class FetchAvailabilityUseCase:
    def __init__(self, availability: AvailabilityPort) -> None:
        self._availability = availability
        self._logger = logging.getLogger(__name__)

    async def execute(self, provider_id: str, day: date | datetime) -> AvailabilityLookup:
        target = to_calendar_date(day)
        try:
            slots = await self._availability.fetch_availability(provider_id, target)
        except (AvailabilityUpstreamError, AvailabilityContractError) as e:
            # Callers that only read `slots` can't tell this apart from a day with no slots
            self._logger.warning(
                "Availability fetch failed",
                extra={"provider_id": provider_id, "date": format_date_key(target), "error": str(e)},
            )
            return AvailabilityLookup(provider_id=provider_id, date=target, slots=(), failed=True)
        except Exception as e:
            self._logger.exception(
                "Availability fetch crashed",
                extra={"provider_id": provider_id, "date": format_date_key(target), "error": str(e)},
            )
            return AvailabilityLookup(provider_id=provider_id, date=target, slots=(), failed=True)

        self._logger.info(
            "Availability fetched",
            extra={"provider_id": provider_id, "date": format_date_key(target), "slot_count": len(slots)},
        )
        return AvailabilityLookup(provider_id=provider_id, date=target, slots=tuple(slots))
