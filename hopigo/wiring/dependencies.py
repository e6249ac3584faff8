from datetime import datetime
from functools import lru_cache
import logging
from typing import Callable

from hopigo.application.ports.availability import AvailabilityPort
from hopigo.application.ports.booking_store import BookingStorePort
from hopigo.application.ports.provider_directory import ProviderDirectoryPort
from hopigo.application.use_cases.booking_calendar import BookingCalendar
from hopigo.application.use_cases.fetch_availability import FetchAvailabilityUseCase
from hopigo.core.config import settings
from hopigo.infrastructure.availability.http_availability import HttpAvailability
from hopigo.infrastructure.availability.schedule_availability import ScheduleAvailability
from hopigo.infrastructure.directory.provider_directory_store import ProviderDirectoryStore
from hopigo.infrastructure.store.memory_booking_store import MemoryBookingStore
from hopigo.infrastructure.store.seed_bookings import build_seed_bookings


logger = logging.getLogger(__name__)


@lru_cache
def get_provider_directory() -> ProviderDirectoryPort:
    return ProviderDirectoryStore()


@lru_cache
def get_booking_store() -> BookingStorePort:
    if settings.ENV.lower() in {"dev", "local"}:
        return MemoryBookingStore(build_seed_bookings())
    return MemoryBookingStore()


@lru_cache
def get_availability() -> AvailabilityPort:
    if settings.AVAILABILITY_BASE_URL:
        logger.info("Using HttpAvailability", extra={"base_url": settings.AVAILABILITY_BASE_URL})
        return HttpAvailability()
    logger.info("Using ScheduleAvailability (AVAILABILITY_BASE_URL not set)")
    return ScheduleAvailability(directory=get_provider_directory(), bookings=get_booking_store())


async def close_availability() -> None:
    """Release the cached availability adapter; the next get_availability() builds a fresh one."""
    if get_availability.cache_info().currsize == 0:
        return
    availability = get_availability()
    get_availability.cache_clear()
    if isinstance(availability, HttpAvailability):
        await availability.aclose()
        logger.info("Closed HttpAvailability client")


def get_fetch_availability_use_case() -> FetchAvailabilityUseCase:
    return FetchAvailabilityUseCase(availability=get_availability())


def build_booking_calendar(
    provider_id: str,
    on_select_date_time: Callable[[datetime], None],
) -> BookingCalendar:
    return BookingCalendar(
        provider_id=provider_id,
        fetch_availability=get_fetch_availability_use_case(),
        on_select_date_time=on_select_date_time,
        months_ahead=settings.BOOKING_WINDOW_MONTHS,
        primary_color=settings.DOT_COLOR_PRIMARY,
        warning_color=settings.DOT_COLOR_WARNING,
    )
