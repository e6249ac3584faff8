from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from hopigo.domain.entities.availability import AvailabilitySlot


class SelectionStatus(str, Enum):
    no_date_selected = "no_date_selected"
    date_selected_no_slots = "date_selected_no_slots"
    slots_loaded = "slots_loaded"
    slot_chosen = "slot_chosen"


@dataclass(frozen=True)
class SelectionState:
    status: SelectionStatus = SelectionStatus.no_date_selected
    selected_date: date | None = None
    slots: tuple[AvailabilitySlot, ...] = ()
    selected_slot_start_time: datetime | None = None
    request_id: int = 0  # id of the newest availability fetch issued
    load_failed: bool = False  # last fetch failed; slots is empty
