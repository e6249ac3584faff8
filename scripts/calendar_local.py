#!/usr/bin/env python3
"""
Interactive local booking calendar harness (no HTTP).

Usage:
  python3 scripts/calendar_local.py [provider_id]

What it does:
- Builds a BookingCalendar through the project wiring
- Prints the month grid (today in brackets, selected date with *, booked dates with .)
- Lets you pick a date and a time slot, and prints the start time handed to the booking step
"""

from __future__ import annotations

import asyncio
import sys
from datetime import datetime
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hopigo.application.use_cases.booking_calendar import BookingCalendar  # noqa: E402
from hopigo.application.use_cases.slot_selection import SlotListing  # noqa: E402
from hopigo.application.utils.month_grid import WEEKDAY_LABELS, month_title, parse_date_key  # noqa: E402
from hopigo.application.utils.slot_format import format_slot_time  # noqa: E402
from hopigo.wiring.dependencies import build_booking_calendar, get_booking_store  # noqa: E402


def _print_help() -> None:
    print("Commands:")
    print("  n / p            next / previous month")
    print("  d YYYY-MM-DD     select a date")
    print("  s N              choose slot number N")
    print("  /help, /quit")


def _print_grid(calendar: BookingCalendar) -> None:
    bookings = get_booking_store().list_bookings(calendar.provider_id)
    print(f"\n{month_title(calendar.visible_month):^35}")
    print(" ".join(f"{label:>4}" for label in WEEKDAY_LABELS))
    days = calendar.calendar_days(bookings)
    for week_start in range(0, len(days), 7):
        week = days[week_start : week_start + 7]
        cells = []
        for day in week:
            text = f"{day.date.day:2d}" if day.in_current_month else "  "
            if day.is_today:
                text = f"[{text}]"
            elif day.is_selected:
                text = f"*{text}"
            if day.marked:
                text += "."
            cells.append(f"{text:>4}")
        print(" ".join(cells))


def _print_slots(calendar: BookingCalendar) -> None:
    listing = calendar.slot_listing()
    if listing == SlotListing.loading:
        print("Loading available times...")
        return
    if listing == SlotListing.no_slots:
        print("No time slots available for this date")
        return
    if listing == SlotListing.all_booked:
        print("All time slots are booked for this date")
        return
    for n, slot in enumerate(calendar.choosable_slots(), start=1):
        marker = "*" if slot.start_time == calendar.selected_slot_start_time else " "
        print(f" {marker}{n:2d}. {format_slot_time(slot.start_time)}")


async def _run(provider_id: str) -> None:
    def on_select(start_time: datetime) -> None:
        print(f"-> booking start time: {start_time.isoformat()}")

    calendar = build_booking_calendar(provider_id, on_select)
    await calendar.load_initial()

    print("\nLocal Booking Calendar")
    print("-" * 60)
    print(f"provider_id: {provider_id}")
    _print_help()
    print("-" * 60)

    while True:
        _print_grid(calendar)
        _print_slots(calendar)
        label = calendar.selected_time_label()
        if label:
            print(f"Selected Time: {label}")

        try:
            line = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return

        if not line:
            continue
        if line in ("/quit", "q"):
            return
        if line == "/help":
            _print_help()
        elif line == "n":
            calendar.next_month()
        elif line == "p":
            calendar.previous_month()
        elif line.startswith("d "):
            try:
                day = parse_date_key(line[2:])
            except ValueError:
                print("Use YYYY-MM-DD")
                continue
            if not await calendar.select_date(day):
                print("That date can't be booked")
        elif line.startswith("s "):
            slots = calendar.choosable_slots()
            try:
                index = int(line[2:]) - 1
                if index < 0:
                    raise IndexError(index)
                slot = slots[index]
            except (ValueError, IndexError):
                print("No such slot")
                continue
            calendar.choose_slot(slot.start_time)
        else:
            print("Unknown command, /help for help")


def main() -> None:
    provider_id = sys.argv[1] if len(sys.argv) > 1 else "1"
    asyncio.run(_run(provider_id))


if __name__ == "__main__":
    main()
