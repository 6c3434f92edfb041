from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import date

from clinix.domain.entities.booking_draft import BookingDraft, ClientDetails, WizardStep
from clinix.domain.entities.service import Service
from clinix.domain.entities.time_slot import TimeSlot

SlotProvider = Callable[[date, int], list[TimeSlot]]


class BookingWizard:
    """
    Public booking flow: service -> date -> time -> details -> confirmed.

    Every transition returns True when applied and False when ignored.
    An ignored transition leaves step and draft untouched. Choosing a time
    and submitting details re-read the day's slots first.
    """

    def __init__(self, slot_provider: SlotProvider, session_id: str | None = None) -> None:
        self._slot_provider = slot_provider
        self._session_id = session_id
        self._step = WizardStep.SELECT_SERVICE
        self._draft = BookingDraft()
        self._time_slots: list[TimeSlot] = []
        self._logger = logging.getLogger(__name__)

    @property
    def step(self) -> WizardStep:
        return self._step

    @property
    def draft(self) -> BookingDraft:
        return self._draft

    @property
    def time_slots(self) -> list[TimeSlot]:
        return list(self._time_slots)

    def find_slot(self, slot_id: str) -> TimeSlot | None:
        return next((slot for slot in self._time_slots if slot.id == slot_id), None)

    def select_service(self, service: Service) -> bool:
        if self._step != WizardStep.SELECT_SERVICE:
            return self._ignore("select_service", "wrong_step")
        self._draft = replace(self._draft, service=service)
        return self._advance(WizardStep.SELECT_DATE)

    def select_date(self, selected_date: date) -> bool:
        if self._step != WizardStep.SELECT_DATE:
            return self._ignore("select_date", "wrong_step")
        if self._draft.service is None:
            return self._ignore("select_date", "no_service")
        self._time_slots = self._slot_provider(selected_date, self._draft.service.duration)
        self._draft = replace(self._draft, date=selected_date)
        return self._advance(WizardStep.SELECT_TIME)

    def select_time(self, slot: TimeSlot) -> bool:
        if self._step != WizardStep.SELECT_TIME:
            return self._ignore("select_time", "wrong_step")
        if not slot.available:
            return self._ignore("select_time", "slot_unavailable")
        current = self._current_slot(slot.id)
        if current is None or not current.available:
            return self._ignore("select_time", "slot_taken")
        self._draft = replace(self._draft, time_slot=current)
        return self._advance(WizardStep.ENTER_DETAILS)

    def submit_details(self, details: ClientDetails) -> bool:
        if self._step != WizardStep.ENTER_DETAILS:
            return self._ignore("submit_details", "wrong_step")
        invalid = details.invalid_fields()
        if invalid:
            return self._ignore("submit_details", "invalid:" + ",".join(invalid))
        current = self._current_slot(self._draft.time_slot.id)
        if current is None or not current.available:
            return self._ignore("submit_details", "slot_taken")
        self._draft = replace(self._draft, client=details)
        return self._advance(WizardStep.CONFIRMED)

    def back(self) -> bool:
        # Selections are kept so moving forward again shows them.
        if self._step not in (WizardStep.SELECT_DATE, WizardStep.SELECT_TIME, WizardStep.ENTER_DETAILS):
            return self._ignore("back", "wrong_step")
        return self._advance(WizardStep(self._step - 1))

    def restart(self) -> bool:
        if self._step != WizardStep.CONFIRMED:
            return self._ignore("restart", "wrong_step")
        self._draft = BookingDraft()
        self._time_slots = []
        return self._advance(WizardStep.SELECT_SERVICE)

    def _current_slot(self, slot_id: str) -> TimeSlot | None:
        """Re-read the day's slots so a slot booked by someone else is seen as taken."""
        self._time_slots = self._slot_provider(self._draft.date, self._draft.service.duration)
        return self.find_slot(slot_id)

    def _advance(self, step: WizardStep) -> bool:
        self._logger.debug(
            "Wizard step %s -> %s",
            self._step.name,
            step.name,
            extra={"session_id": self._session_id, "step": step.name},
        )
        self._step = step
        return True

    def _ignore(self, action: str, reason: str) -> bool:
        self._logger.info(
            "Wizard transition ignored: %s",
            action,
            extra={"session_id": self._session_id, "step": self._step.name, "reason": reason},
        )
        return False
