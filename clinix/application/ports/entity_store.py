from __future__ import annotations

from abc import ABC, abstractmethod

from clinix.domain.entities.appointment import Appointment
from clinix.domain.entities.service import Service


class EntityStorePort(ABC):
    @abstractmethod
    def list_services(self) -> list[Service]:
        raise NotImplementedError

    @abstractmethod
    def get_service(self, service_id: str) -> Service | None:
        raise NotImplementedError

    @abstractmethod
    def add_service(self, service: Service) -> None:
        raise NotImplementedError

    @abstractmethod
    def put_service(self, service: Service) -> bool:
        """Replace the service with the same id. Returns False if there is none."""
        raise NotImplementedError

    @abstractmethod
    def remove_service(self, service_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def list_appointments(self) -> list[Appointment]:
        raise NotImplementedError

    @abstractmethod
    def get_appointment(self, appointment_id: str) -> Appointment | None:
        raise NotImplementedError

    @abstractmethod
    def add_appointment(self, appointment: Appointment) -> None:
        raise NotImplementedError

    @abstractmethod
    def put_appointment(self, appointment: Appointment) -> bool:
        """Replace the appointment with the same id. Returns False if there is none."""
        raise NotImplementedError
