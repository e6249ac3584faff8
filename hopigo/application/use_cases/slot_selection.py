from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from enum import Enum
from typing import Iterable

from hopigo.application.utils.month_grid import to_calendar_date
from hopigo.domain.entities.availability import AvailabilitySlot
from hopigo.domain.entities.selection_state import SelectionState, SelectionStatus


class SlotListing(str, Enum):
    loading = "loading"
    no_slots = "no_slots"  # nothing configured for the date
    all_booked = "all_booked"  # slots exist but none is available
    available = "available"


def select_date(state: SelectionState, day: date | datetime) -> SelectionState:
    """
    Start a new availability fetch for `day`.

    Always drops the chosen slot and the loaded slots, even when `day` is the
    date already selected. The returned state's `request_id` identifies the
    fetch the caller must issue.
    """
    return SelectionState(
        status=SelectionStatus.date_selected_no_slots,
        selected_date=to_calendar_date(day),
        slots=(),
        selected_slot_start_time=None,
        request_id=state.request_id + 1,
        load_failed=False,
    )


def slots_arrived(
    state: SelectionState,
    request_id: int,
    slots: Iterable[AvailabilitySlot],
    failed: bool = False,
) -> SelectionState:
    """Store fetched slots. Responses for any request but the newest are ignored."""
    if request_id != state.request_id or state.status != SelectionStatus.date_selected_no_slots:
        return state
    return replace(
        state,
        status=SelectionStatus.slots_loaded,
        slots=tuple(slots),
        load_failed=failed,
    )


def find_choosable_slot(state: SelectionState, start_time: datetime) -> AvailabilitySlot | None:
    if state.status not in (SelectionStatus.slots_loaded, SelectionStatus.slot_chosen):
        return None
    for slot in state.slots:
        if slot.available and slot.start_time == start_time:
            return slot
    return None


def choose_slot(state: SelectionState, start_time: datetime) -> SelectionState:
    """Choose an available listed slot. Anything else leaves the state untouched."""
    if find_choosable_slot(state, start_time) is None:
        return state
    return replace(state, status=SelectionStatus.slot_chosen, selected_slot_start_time=start_time)


def choosable_slots(state: SelectionState) -> list[AvailabilitySlot]:
    if state.status not in (SelectionStatus.slots_loaded, SelectionStatus.slot_chosen):
        return []
    return [slot for slot in state.slots if slot.available]


def slot_listing_status(state: SelectionState) -> SlotListing:
    if state.status in (SelectionStatus.no_date_selected, SelectionStatus.date_selected_no_slots):
        return SlotListing.loading
    if not state.slots:
        return SlotListing.no_slots
    if not any(slot.available for slot in state.slots):
        return SlotListing.all_booked
    return SlotListing.available
