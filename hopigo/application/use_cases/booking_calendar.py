from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Iterable, Mapping

from hopigo.application.use_cases.fetch_availability import FetchAvailabilityUseCase
from hopigo.application.use_cases.marked_dates import (
    PRIMARY_DOT_COLOR,
    WARNING_DOT_COLOR,
    build_marked_dates,
)
from hopigo.application.use_cases.slot_selection import (
    SlotListing,
    choosable_slots,
    choose_slot,
    find_choosable_slot,
    select_date,
    slot_listing_status,
    slots_arrived,
)
from hopigo.application.utils.month_grid import (
    advance_month,
    booking_window,
    first_of_month,
    format_date_key,
    generate_grid,
    is_in_current_month,
    is_selectable,
    is_today,
    to_calendar_date,
)
from hopigo.application.utils.slot_format import format_selected_time
from hopigo.domain.entities.availability import AvailabilitySlot
from hopigo.domain.entities.booking import BookingRecord, MarkedDateInfo
from hopigo.domain.entities.month_grid import MonthGrid
from hopigo.domain.entities.selection_state import SelectionState, SelectionStatus


@dataclass(frozen=True)
class CalendarDay:
    date: date
    key: str  # YYYY-MM-DD
    in_current_month: bool
    is_today: bool
    is_selected: bool
    is_selectable: bool
    marked: bool = False
    dot_color: str | None = None


def build_calendar_days(
    grid: MonthGrid,
    selected_date: date | None,
    today: date,
    min_date: date | None,
    max_date: date | None,
    marked_dates: Mapping[str, MarkedDateInfo] | None = None,
    default_dot_color: str = PRIMARY_DOT_COLOR,
) -> list[CalendarDay]:
    """Flag every cell of a month grid for display."""
    marked_dates = marked_dates or {}
    days: list[CalendarDay] = []
    for day in grid:
        key = format_date_key(day)
        info = marked_dates.get(key)
        marked = bool(info and info.marked)
        days.append(
            CalendarDay(
                date=day,
                key=key,
                in_current_month=is_in_current_month(day, grid.month),
                is_today=is_today(day, today),
                is_selected=selected_date is not None and day == selected_date,
                is_selectable=is_selectable(day, min_date, max_date),
                marked=marked,
                dot_color=(info.dot_color or default_dot_color) if marked else None,
            )
        )
    return days


class BookingCalendar:
    """
    Date grid plus time-slot picker for one provider's booking flow.

    Selecting a date clears the chosen slot at once and fetches that date's
    slots; a response is applied only if no newer date was selected (and the
    provider didn't change) while it was in flight. Choosing a slot hands its
    start time to `on_select_date_time`.
    """

    def __init__(
        self,
        provider_id: str,
        fetch_availability: FetchAvailabilityUseCase,
        on_select_date_time: Callable[[datetime], None],
        today: Callable[[], date] | None = None,
        months_ahead: int = 3,
        primary_color: str = PRIMARY_DOT_COLOR,
        warning_color: str = WARNING_DOT_COLOR,
    ) -> None:
        self._fetch_availability = fetch_availability
        self._on_select_date_time = on_select_date_time
        self._today = today or date.today
        self._months_ahead = months_ahead
        self._primary_color = primary_color
        self._warning_color = warning_color
        self._logger = logging.getLogger(__name__)

        self._state = SelectionState()
        self._provider_id = provider_id
        self._reset()

    def _reset(self) -> None:
        anchor = to_calendar_date(self._today())
        # request_id keeps counting so responses issued before the reset stay stale
        self._state = SelectionState(selected_date=anchor, request_id=self._state.request_id)
        self._visible_month = first_of_month(anchor)

    @property
    def provider_id(self) -> str:
        return self._provider_id

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def selected_date(self) -> date | None:
        return self._state.selected_date

    @property
    def selected_slot_start_time(self) -> datetime | None:
        return self._state.selected_slot_start_time

    @property
    def visible_month(self) -> date:
        return self._visible_month

    @property
    def is_loading(self) -> bool:
        return self._state.status == SelectionStatus.date_selected_no_slots

    @property
    def min_date(self) -> date:
        return booking_window(self._today(), self._months_ahead)[0]

    @property
    def max_date(self) -> date:
        return booking_window(self._today(), self._months_ahead)[1]

    def change_provider(self, provider_id: str) -> None:
        self._provider_id = provider_id
        self._reset()

    async def load_initial(self) -> None:
        """Fetch slots for the anchored date, as happens when the calendar first opens."""
        await self.select_date(self._state.selected_date or self._today())

    async def select_date(self, day: date | datetime) -> bool:
        target = to_calendar_date(day)
        if not is_selectable(target, self.min_date, self.max_date):
            self._logger.debug(
                "Ignored unselectable date",
                extra={"provider_id": self._provider_id, "date": format_date_key(target)},
            )
            return False

        self._state = select_date(self._state, target)
        request_id = self._state.request_id
        provider_id = self._provider_id

        lookup = await self._fetch_availability.execute(provider_id, target)

        if provider_id != self._provider_id:
            self._logger.info(
                "Discarded availability for previous provider",
                extra={"provider_id": provider_id, "request_id": request_id},
            )
            return True

        updated = slots_arrived(self._state, request_id, lookup.slots, failed=lookup.failed)
        if updated is self._state:
            self._logger.info(
                "Discarded stale availability",
                extra={"provider_id": provider_id, "date": format_date_key(target), "request_id": request_id},
            )
        self._state = updated
        return True

    def choose_slot(self, start_time: datetime) -> bool:
        if find_choosable_slot(self._state, start_time) is None:
            return False
        self._state = choose_slot(self._state, start_time)
        self._on_select_date_time(start_time)
        return True

    def next_month(self) -> date:
        self._visible_month = advance_month(self._visible_month, 1)
        return self._visible_month

    def previous_month(self) -> date:
        self._visible_month = advance_month(self._visible_month, -1)
        return self._visible_month

    def grid(self) -> MonthGrid:
        return generate_grid(self._visible_month)

    def marked_dates(self, bookings: Iterable[BookingRecord]) -> dict[str, MarkedDateInfo]:
        return build_marked_dates(
            bookings,
            self._provider_id,
            primary_color=self._primary_color,
            warning_color=self._warning_color,
        )

    def calendar_days(self, bookings: Iterable[BookingRecord] = ()) -> list[CalendarDay]:
        min_date, max_date = booking_window(self._today(), self._months_ahead)
        return build_calendar_days(
            self.grid(),
            selected_date=self._state.selected_date,
            today=to_calendar_date(self._today()),
            min_date=min_date,
            max_date=max_date,
            marked_dates=self.marked_dates(bookings),
            default_dot_color=self._primary_color,
        )

    def choosable_slots(self) -> list[AvailabilitySlot]:
        return choosable_slots(self._state)

    def slot_listing(self) -> SlotListing:
        return slot_listing_status(self._state)

    def selected_time_label(self) -> str | None:
        if self._state.selected_slot_start_time is None:
            return None
        return format_selected_time(self._state.selected_slot_start_time)
