from datetime import date, datetime

from pydantic import BaseModel, Field

from hopigo.application.use_cases.slot_selection import SlotListing


class ProviderSchema(BaseModel):
    provider_id: str
    name: str
    availability: str
    location: str | None = None


class CalendarDaySchema(BaseModel):
    date: date
    key: str
    in_current_month: bool
    is_today: bool
    is_selected: bool
    is_selectable: bool
    marked: bool = False
    dot_color: str | None = None


class CalendarMonthSchema(BaseModel):
    title: str
    month: date
    min_date: date
    max_date: date
    weekdays: list[str]
    days: list[CalendarDaySchema] = Field(default_factory=list)


class AvailabilitySlotSchema(BaseModel):
    start_time: datetime
    end_time: datetime
    available: bool
    label: str


class AvailabilityResponseSchema(BaseModel):
    provider_id: str
    date: date
    listing: SlotListing
    failed: bool = False
    slots: list[AvailabilitySlotSchema] = Field(default_factory=list)
