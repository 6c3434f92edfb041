"""
Tests for the public booking wizard step flow.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from clinix.application.use_cases.booking_wizard import BookingWizard
from clinix.domain.entities.booking_draft import BookingDraft, ClientDetails, WizardStep
from clinix.domain.entities.service import Service
from clinix.domain.entities.time_slot import TimeSlot

DAY = date(2025, 3, 14)

SLOTS = [
    TimeSlot(id="t1", time="9:00 AM", available=True),
    TimeSlot(id="t2", time="10:00 AM", available=True),
    TimeSlot(id="t3", time="11:00 AM", available=False),
]

HAIRCUT = Service(
    id="1",
    name="Haircut",
    description="Professional haircut with styling",
    price=Decimal("30"),
    duration=30,
    category="Hair",
)

DETAILS = ClientDetails(name="Jane Smith", phone="555-123-4567", email="jane@example.com")


@pytest.fixture
def wizard() -> BookingWizard:
    return BookingWizard(slot_provider=lambda day, duration: list(SLOTS), session_id="test")


def _walk_to_time(wizard: BookingWizard) -> None:
    assert wizard.select_service(HAIRCUT)
    assert wizard.select_date(DAY)


def test_full_traversal_then_restart(wizard):
    assert wizard.step == WizardStep.SELECT_SERVICE

    assert wizard.select_service(HAIRCUT)
    assert wizard.step == WizardStep.SELECT_DATE
    assert wizard.select_date(DAY)
    assert wizard.step == WizardStep.SELECT_TIME
    assert wizard.time_slots == SLOTS
    assert wizard.select_time(SLOTS[0])
    assert wizard.step == WizardStep.ENTER_DETAILS
    assert wizard.submit_details(DETAILS)
    assert wizard.step == WizardStep.CONFIRMED
    assert wizard.draft == BookingDraft(service=HAIRCUT, date=DAY, time_slot=SLOTS[0], client=DETAILS)

    assert wizard.restart()
    assert wizard.step == WizardStep.SELECT_SERVICE
    assert wizard.draft == BookingDraft()
    assert wizard.draft.is_empty
    assert wizard.time_slots == []


def test_unavailable_slot_is_ignored(wizard):
    _walk_to_time(wizard)
    draft_before = wizard.draft

    assert wizard.select_time(SLOTS[2]) is False
    assert wizard.step == WizardStep.SELECT_TIME
    assert wizard.draft == draft_before


def test_transitions_out_of_order_are_ignored(wizard):
    assert wizard.select_date(DAY) is False
    assert wizard.select_time(SLOTS[0]) is False
    assert wizard.submit_details(DETAILS) is False
    assert wizard.restart() is False
    assert wizard.back() is False
    assert wizard.step == WizardStep.SELECT_SERVICE
    assert wizard.draft.is_empty

    assert wizard.select_service(HAIRCUT)
    assert wizard.select_service(HAIRCUT) is False
    assert wizard.step == WizardStep.SELECT_DATE


def test_missing_details_do_not_confirm(wizard):
    _walk_to_time(wizard)
    assert wizard.select_time(SLOTS[1])

    incomplete = ClientDetails(name="Jane Smith", phone="  ", email="jane@example.com")
    assert incomplete.missing_fields() == ["phone"]
    assert wizard.submit_details(incomplete) is False
    assert wizard.step == WizardStep.ENTER_DETAILS
    assert wizard.draft.client is None

    no_at_sign = ClientDetails(name="Jane Smith", phone="555-123-4567", email="foo")
    assert no_at_sign.missing_fields() == []
    assert no_at_sign.invalid_fields() == ["email"]
    assert wizard.submit_details(no_at_sign) is False
    assert wizard.step == WizardStep.ENTER_DETAILS
    assert wizard.draft.client is None


def test_back_keeps_previous_selections(wizard):
    _walk_to_time(wizard)
    assert wizard.select_time(SLOTS[1])

    assert wizard.back()
    assert wizard.step == WizardStep.SELECT_TIME
    assert wizard.back()
    assert wizard.step == WizardStep.SELECT_DATE
    assert wizard.back()
    assert wizard.step == WizardStep.SELECT_SERVICE

    assert wizard.draft.service == HAIRCUT
    assert wizard.draft.date == DAY
    assert wizard.draft.time_slot == SLOTS[1]


def test_slot_provider_receives_date_and_service_duration():
    calls = []

    def provider(day, duration):
        calls.append((day, duration))
        return list(SLOTS)

    wizard = BookingWizard(slot_provider=provider)
    wizard.select_service(HAIRCUT)
    wizard.select_date(DAY)

    assert calls == [(DAY, 30)]
    assert wizard.find_slot("t2") == SLOTS[1]
    assert wizard.find_slot("nope") is None


class _Schedule:
    """Slot provider whose availability can change between calls."""

    def __init__(self) -> None:
        self.taken: set[str] = set()

    def __call__(self, day, duration):
        return [
            TimeSlot(id=slot.id, time=slot.time, available=slot.available and slot.id not in self.taken)
            for slot in SLOTS
        ]


def test_slot_taken_after_date_choice_is_rejected():
    schedule = _Schedule()
    wizard = BookingWizard(slot_provider=schedule)
    _walk_to_time(wizard)
    shown = wizard.find_slot("t1")
    assert shown.available

    schedule.taken.add("t1")

    assert wizard.select_time(shown) is False
    assert wizard.step == WizardStep.SELECT_TIME
    assert wizard.draft.time_slot is None
    assert wizard.find_slot("t1").available is False


def test_slot_taken_before_details_blocks_confirmation():
    schedule = _Schedule()
    wizard = BookingWizard(slot_provider=schedule)
    _walk_to_time(wizard)
    assert wizard.select_time(wizard.find_slot("t2"))

    schedule.taken.add("t2")

    assert wizard.submit_details(DETAILS) is False
    assert wizard.step == WizardStep.ENTER_DETAILS
    assert wizard.draft.client is None

    assert wizard.back()
    assert wizard.select_time(wizard.find_slot("t1"))
    assert wizard.submit_details(DETAILS)
    assert wizard.draft.time_slot.id == "t1"
