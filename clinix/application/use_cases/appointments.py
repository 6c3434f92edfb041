from __future__ import annotations

import logging
import secrets
import threading
from dataclasses import replace
from datetime import date

from clinix.application.exceptions import SlotUnavailableError
from clinix.application.ports.entity_store import EntityStorePort
from clinix.application.use_cases.availability import AvailabilityUseCase
from clinix.application.utils.time_format import same_day
from clinix.domain.entities.appointment import Appointment, AppointmentStatus
from clinix.domain.entities.booking_draft import BookingDraft
from clinix.domain.entities.dashboard import DashboardMetrics

# Serializes the slot check and the insert across request threads
_booking_lock = threading.RLock()


def generate_appointment_id() -> str:
    return secrets.token_hex(4)


class AppointmentUseCase:
    def __init__(self, store: EntityStorePort, availability: AvailabilityUseCase | None = None) -> None:
        self._store = store
        self._availability = availability
        self._logger = logging.getLogger(__name__)

    def list_appointments(self) -> list[Appointment]:
        return self._store.list_appointments()

    def get(self, appointment_id: str) -> Appointment | None:
        return self._store.get_appointment(appointment_id)

    def update_status(self, appointment_id: str, status: AppointmentStatus) -> Appointment | None:
        current = self._store.get_appointment(appointment_id)
        if current is None:
            self._logger.info(
                "Appointment status update ignored",
                extra={"appointment_id": appointment_id, "reason": "not_found"},
            )
            return None

        updated = replace(current, status=AppointmentStatus(status))
        self._store.put_appointment(updated)
        self._logger.info(
            "Appointment status updated to %s",
            updated.status.value,
            extra={"appointment_id": appointment_id},
        )
        return updated

    def booking_guard(self):
        """Hold while confirming a wizard and recording its booking."""
        return _booking_lock

    def record_booking(self, draft: BookingDraft) -> Appointment | None:
        """
        Store a confirmed wizard draft as a pending appointment. Incomplete drafts are ignored.
        Raises SlotUnavailableError if the draft's slot has been taken meanwhile.
        """
        if draft.service is None or draft.date is None or draft.time_slot is None or draft.client is None:
            return None

        with _booking_lock:
            if self._availability is not None:
                slots = self._availability.slots_for(draft.date, draft.service.duration)
                current = next((slot for slot in slots if slot.id == draft.time_slot.id), None)
                if current is None or not current.available:
                    self._logger.info(
                        "Booking rejected",
                        extra={"service_id": draft.service.id, "reason": "slot_taken"},
                    )
                    raise SlotUnavailableError(f"{draft.time_slot.time} on {draft.date.isoformat()} is no longer available.")

            appointment_id = generate_appointment_id()
            while self._store.get_appointment(appointment_id) is not None:
                appointment_id = generate_appointment_id()

            appointment = Appointment(
                id=appointment_id,
                client_name=draft.client.name,
                service_name=draft.service.name,
                service_id=draft.service.id,
                date=draft.date,
                time=draft.time_slot.time,
                duration=draft.service.duration,
                status=AppointmentStatus.pending,
                notes=draft.client.notes or None,
                client_phone=draft.client.phone,
                client_email=draft.client.email,
            )
            self._store.add_appointment(appointment)

        self._logger.info("Booking recorded", extra={"appointment_id": appointment.id, "service_id": draft.service.id})
        return appointment

    def metrics(self, today: date) -> DashboardMetrics:
        appointments = self._store.list_appointments()
        clients = {
            (appointment.client_email or appointment.client_name).strip().lower()
            for appointment in appointments
        }
        return DashboardMetrics(
            total_appointments=len(appointments),
            total_services=len(self._store.list_services()),
            total_clients=len(clients),
            appointments_today=sum(1 for appointment in appointments if same_day(appointment.date, today)),
            pending_appointments=sum(
                1 for appointment in appointments if appointment.status == AppointmentStatus.pending
            ),
        )
