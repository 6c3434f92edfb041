from __future__ import annotations

import logging
import secrets
import string
from dataclasses import dataclass, fields, replace
from decimal import Decimal

from clinix.application.exceptions import ServiceInUseError, ServiceValidationError
from clinix.application.ports.entity_store import EntityStorePort
from clinix.domain.entities.service import Service, ServiceStatus

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH = 7


@dataclass(frozen=True)
class ServiceFields:
    """Fields accepted by the service form. None means 'not provided'."""

    name: str | None = None
    description: str | None = None
    price: Decimal | None = None
    duration: int | None = None
    category: str | None = None
    status: ServiceStatus | None = None

    def provided(self) -> dict[str, object]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


def generate_service_id() -> str:
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


def validate_service(service: Service) -> None:
    if not service.name or not service.name.strip():
        raise ServiceValidationError("Service name is required.")
    if service.price < 0:
        raise ServiceValidationError("Service price must not be negative.")
    if service.duration <= 0:
        raise ServiceValidationError("Service duration must be a positive number of minutes.")


class ServiceCrudUseCase:
    def __init__(self, store: EntityStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def list_services(self) -> list[Service]:
        return self._store.list_services()

    def get(self, service_id: str) -> Service | None:
        return self._store.get_service(service_id)

    def create(self, service_fields: ServiceFields, service_id: str | None = None) -> Service:
        if service_fields.name is None or service_fields.price is None or service_fields.duration is None:
            raise ServiceValidationError("Service name, price and duration are required.")

        if service_id is None:
            service_id = generate_service_id()
            while self._store.get_service(service_id) is not None:
                service_id = generate_service_id()
        elif self._store.get_service(service_id) is not None:
            raise ServiceValidationError(f"Service id {service_id} already exists.")

        service = Service(
            id=service_id,
            name=service_fields.name.strip(),
            description=service_fields.description or "",
            price=Decimal(service_fields.price),
            duration=int(service_fields.duration),
            category=service_fields.category or "Other",
            status=service_fields.status or ServiceStatus.active,
        )
        validate_service(service)

        self._store.add_service(service)
        self._logger.info("Service created", extra={"service_id": service.id})
        return service

    def update(self, service_id: str, service_fields: ServiceFields) -> Service | None:
        current = self._store.get_service(service_id)
        if current is None:
            self._logger.info("Service update ignored", extra={"service_id": service_id, "reason": "not_found"})
            return None

        changes = service_fields.provided()
        if "name" in changes:
            changes["name"] = str(changes["name"]).strip()
        updated = replace(current, **changes)
        validate_service(updated)

        self._store.put_service(updated)
        self._logger.info("Service updated", extra={"service_id": service_id})
        return updated

    def delete(self, service_id: str) -> bool:
        if self._store.get_service(service_id) is None:
            self._logger.info("Service delete ignored", extra={"service_id": service_id, "reason": "not_found"})
            return False

        referencing = [
            appointment.id
            for appointment in self._store.list_appointments()
            if appointment.service_id == service_id and appointment.is_active
        ]
        if referencing:
            raise ServiceInUseError(service_id, referencing)

        self._store.remove_service(service_id)
        self._logger.info("Service deleted", extra={"service_id": service_id})
        return True
