#!/usr/bin/env python3
"""
Interactive local booking harness (no HTTP).

Usage:
  python3 scripts/book_local.py

What it does:
- Builds a booking wizard through the same wiring the API uses
- Walks service -> date -> time -> details and prints the draft at each step
- Commands: /back (previous step), /new (book another), /quit
"""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from clinix.application.use_cases.appointments import AppointmentUseCase  # noqa: E402
from clinix.application.use_cases.booking_wizard import BookingWizard  # noqa: E402
from clinix.application.utils.time_format import format_display_date, upcoming_dates  # noqa: E402
from clinix.core.config import settings  # noqa: E402
from clinix.domain.entities.booking_draft import ClientDetails, WizardStep  # noqa: E402
from clinix.wiring.dependencies import (  # noqa: E402
    build_booking_wizard,
    get_appointment_use_case,
    get_entity_store,
)


def _print_header() -> None:
    print(f"\n{settings.BUSINESS_NAME}")
    print(settings.BUSINESS_TAGLINE)
    print("-" * 60)
    print("Commands: /back, /new, /quit")
    print("-" * 60)


def _choose(options: list[str], prompt: str) -> int | str | None:
    for index, label in enumerate(options, 1):
        print(f"  {index}. {label}")
    raw = input(f"{prompt} > ").strip()
    if raw.startswith("/"):
        return raw
    if raw.isdigit() and 1 <= int(raw) <= len(options):
        return int(raw) - 1
    print("  (pick a number from the list)")
    return None


def _step(wizard: BookingWizard, appointments: AppointmentUseCase) -> bool:
    """Run one prompt for the current step. Returns False to quit."""
    step = wizard.step
    print(f"\n[{int(step)}/5] {step.name.replace('_', ' ').title()}")

    if step == WizardStep.SELECT_SERVICE:
        services = get_entity_store().list_services()
        choice = _choose([f"{s.name} (${s.price}, {s.duration} min)" for s in services], "service")
        if isinstance(choice, int):
            wizard.select_service(services[choice])
        return _command(choice, wizard)

    if step == WizardStep.SELECT_DATE:
        days = upcoming_dates(date.today(), settings.BOOKING_DAYS_AHEAD)
        choice = _choose([format_display_date(d) for d in days], "date")
        if isinstance(choice, int):
            wizard.select_date(days[choice])
        return _command(choice, wizard)

    if step == WizardStep.SELECT_TIME:
        slots = wizard.time_slots
        choice = _choose([s.time + ("" if s.available else " (booked)") for s in slots], "time")
        if isinstance(choice, int) and not wizard.select_time(slots[choice]):
            print("  That time is not available.")
        return _command(choice, wizard)

    if step == WizardStep.ENTER_DETAILS:
        name = input("name > ").strip()
        if name.startswith("/"):
            return _command(name, wizard)
        details = ClientDetails(
            name=name,
            phone=input("phone > ").strip(),
            email=input("email > ").strip(),
            notes=input("notes (optional) > ").strip(),
        )
        with appointments.booking_guard():
            if not wizard.submit_details(details):
                invalid = details.invalid_fields()
                if invalid:
                    print(f"  Please check: {', '.join(invalid)}")
                else:
                    print("  That time was just booked. Use /back to pick another.")
                return True
            appointment = appointments.record_booking(wizard.draft)
        draft = wizard.draft
        print(f"\nBooked {draft.service.name} on {format_display_date(draft.date)} at {draft.time_slot.time}.")
        if appointment is not None:
            print(f"Reference: {appointment.id}")
        return True

    raw = input("/new to book another, /quit to exit > ").strip()
    return _command(raw, wizard)


def _command(choice: int | str | None, wizard: BookingWizard) -> bool:
    if choice == "/quit":
        return False
    if choice == "/back":
        wizard.back()
    elif choice == "/new":
        wizard.restart()
    return True


def main() -> None:
    _print_header()
    wizard = build_booking_wizard("local")
    appointments = get_appointment_use_case()
    try:
        while _step(wizard, appointments):
            pass
    except (EOFError, KeyboardInterrupt):
        print()


if __name__ == "__main__":
    main()
