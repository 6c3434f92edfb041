from __future__ import annotations

from collections.abc import Iterable

from clinix.application.ports.entity_store import EntityStorePort
from clinix.domain.entities.appointment import Appointment
from clinix.domain.entities.service import Service


class MemoryEntityStore(EntityStorePort):
    def __init__(
        self,
        services: Iterable[Service] | None = None,
        appointments: Iterable[Appointment] | None = None,
    ) -> None:
        self._services: list[Service] = list(services or [])
        self._appointments: list[Appointment] = list(appointments or [])

    def list_services(self) -> list[Service]:
        return list(self._services)

    def get_service(self, service_id: str) -> Service | None:
        return next((service for service in self._services if service.id == service_id), None)

    def add_service(self, service: Service) -> None:
        self._services.append(service)

    def put_service(self, service: Service) -> bool:
        for index, existing in enumerate(self._services):
            if existing.id == service.id:
                self._services[index] = service
                return True
        return False

    def remove_service(self, service_id: str) -> bool:
        remaining = [service for service in self._services if service.id != service_id]
        removed = len(remaining) != len(self._services)
        self._services = remaining
        return removed

    def list_appointments(self) -> list[Appointment]:
        return list(self._appointments)

    def get_appointment(self, appointment_id: str) -> Appointment | None:
        return next((appointment for appointment in self._appointments if appointment.id == appointment_id), None)

    def add_appointment(self, appointment: Appointment) -> None:
        self._appointments.append(appointment)

    def put_appointment(self, appointment: Appointment) -> bool:
        for index, existing in enumerate(self._appointments):
            if existing.id == appointment.id:
                self._appointments[index] = appointment
                return True
        return False
