from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from hopigo.api.v1.schemas import (
    AvailabilityResponseSchema,
    AvailabilitySlotSchema,
    CalendarDaySchema,
    CalendarMonthSchema,
    ProviderSchema,
)
from hopigo.application.ports.booking_store import BookingStorePort
from hopigo.application.ports.provider_directory import ProviderDirectoryPort
from hopigo.application.use_cases.booking_calendar import build_calendar_days
from hopigo.application.use_cases.fetch_availability import FetchAvailabilityUseCase
from hopigo.application.use_cases.marked_dates import build_marked_dates
from hopigo.application.use_cases.slot_selection import select_date, slot_listing_status, slots_arrived
from hopigo.application.utils.month_grid import (
    WEEKDAY_LABELS,
    booking_window,
    generate_grid,
    is_selectable,
    month_title,
    parse_date_key,
)
from hopigo.application.utils.slot_format import format_slot_time
from hopigo.core.config import settings
from hopigo.domain.entities.selection_state import SelectionState
from hopigo.wiring.dependencies import (
    get_booking_store,
    get_fetch_availability_use_case,
    get_provider_directory,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _parse_date_param(value: str, name: str) -> date:
    try:
        return parse_date_key(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"'{name}' must be a YYYY-MM-DD date")


@router.get("/providers", response_model=list[ProviderSchema])
def list_providers(directory: ProviderDirectoryPort = Depends(get_provider_directory)):
    return [ProviderSchema(**asdict(p)) for p in directory.list_providers()]


@router.get("/calendar/{year}/{month}", response_model=CalendarMonthSchema)
def get_calendar_month(
    year: int = Path(..., ge=1, le=9999),
    month: int = Path(..., ge=1, le=12),
    provider_id: str | None = Query(None),
    selected: str | None = Query(None),
    store: BookingStorePort = Depends(get_booking_store),
):
    selected_date = _parse_date_param(selected, "selected") if selected else None
    today = date.today()
    min_date, max_date = booking_window(today, settings.BOOKING_WINDOW_MONTHS)
    try:
        grid = generate_grid(date(year, month, 1))
    except OverflowError:
        raise HTTPException(status_code=400, detail="Month grid falls outside the supported date range")

    marked = {}
    if provider_id:
        marked = build_marked_dates(
            store.list_bookings(provider_id),
            provider_id,
            primary_color=settings.DOT_COLOR_PRIMARY,
            warning_color=settings.DOT_COLOR_WARNING,
        )

    days = build_calendar_days(
        grid,
        selected_date=selected_date,
        today=today,
        min_date=min_date,
        max_date=max_date,
        marked_dates=marked,
        default_dot_color=settings.DOT_COLOR_PRIMARY,
    )
    return CalendarMonthSchema(
        title=month_title(grid.month),
        month=grid.month,
        min_date=min_date,
        max_date=max_date,
        weekdays=list(WEEKDAY_LABELS),
        days=[CalendarDaySchema(**asdict(d)) for d in days],
    )


@router.get("/providers/{provider_id}/availability", response_model=AvailabilityResponseSchema)
async def get_provider_availability(
    provider_id: str,
    date_param: str = Query(..., alias="date"),
    directory: ProviderDirectoryPort = Depends(get_provider_directory),
    uc: FetchAvailabilityUseCase = Depends(get_fetch_availability_use_case),
):
    day = _parse_date_param(date_param, "date")
    if directory.get_provider(provider_id) is None:
        raise HTTPException(status_code=404, detail="Provider not found")

    min_date, max_date = booking_window(date.today(), settings.BOOKING_WINDOW_MONTHS)
    if not is_selectable(day, min_date, max_date):
        raise HTTPException(status_code=400, detail="Date is outside the booking window")

    lookup = await uc.execute(provider_id, day)

    state = select_date(SelectionState(), day)
    state = slots_arrived(state, state.request_id, lookup.slots, failed=lookup.failed)

    return AvailabilityResponseSchema(
        provider_id=provider_id,
        date=day,
        listing=slot_listing_status(state),
        failed=lookup.failed,
        slots=[
            AvailabilitySlotSchema(
                start_time=s.start_time,
                end_time=s.end_time,
                available=s.available,
                label=format_slot_time(s.start_time),
            )
            for s in lookup.slots
        ],
    )
