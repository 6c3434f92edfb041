"""
Tests for service create/update/delete over the in-memory store.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from clinix.application.exceptions import ServiceInUseError, ServiceValidationError
from clinix.application.use_cases.service_crud import ServiceCrudUseCase, ServiceFields
from clinix.domain.entities.appointment import AppointmentStatus
from clinix.domain.entities.service import ServiceStatus
from clinix.infrastructure.store.memory_store import MemoryEntityStore
from clinix.infrastructure.store.seed_data import seed_appointments, seed_services


@pytest.fixture
def store() -> MemoryEntityStore:
    return MemoryEntityStore(seed_services(), seed_appointments(date(2025, 3, 14)))


@pytest.fixture
def crud(store) -> ServiceCrudUseCase:
    return ServiceCrudUseCase(store)


def _massage_fields() -> ServiceFields:
    return ServiceFields(
        name="Massage",
        description="Relaxing full body massage",
        price=Decimal("80"),
        duration=60,
        category="Massage",
    )


def test_create_appends_with_generated_id(crud, store):
    service = crud.create(_massage_fields())

    assert len(service.id) == 7
    assert service.id not in {"1", "2", "3", "4"}
    assert service.status == ServiceStatus.active
    assert store.list_services()[-1] == service
    assert len(store.list_services()) == 5


def test_create_then_update_name_only(crud):
    created = crud.create(_massage_fields())

    updated = crud.update(created.id, ServiceFields(name="X"))

    assert updated is not None
    assert updated.name == "X"
    assert updated.description == created.description
    assert updated.price == created.price
    assert updated.duration == created.duration
    assert updated.category == created.category
    assert updated.status == created.status
    assert crud.get(created.id) == updated


def test_update_keeps_position(crud, store):
    crud.update("2", ServiceFields(price=Decimal("40"), status=ServiceStatus.inactive))

    services = store.list_services()
    assert [s.id for s in services] == ["1", "2", "3", "4"]
    assert services[1].price == Decimal("40")
    assert services[1].status == ServiceStatus.inactive
    assert services[1].name == "Manicure"


@pytest.mark.parametrize(
    "fields",
    [
        ServiceFields(name="  ", price=Decimal("10"), duration=30),
        ServiceFields(name="Wax", price=Decimal("-1"), duration=30),
        ServiceFields(name="Wax", price=Decimal("10"), duration=0),
        ServiceFields(name="Wax", duration=30),
    ],
)
def test_create_rejects_invalid_fields(crud, store, fields):
    with pytest.raises(ServiceValidationError):
        crud.create(fields)
    assert len(store.list_services()) == 4


def test_create_rejects_duplicate_explicit_id(crud):
    with pytest.raises(ServiceValidationError):
        crud.create(_massage_fields(), service_id="1")


def test_invalid_update_leaves_record_unchanged(crud):
    before = crud.get("3")

    with pytest.raises(ServiceValidationError):
        crud.update("3", ServiceFields(duration=-5))

    assert crud.get("3") == before


def test_delete_then_update_is_noop(crud, store):
    created = crud.create(_massage_fields())
    assert crud.delete(created.id) is True
    size = len(store.list_services())

    assert crud.update(created.id, ServiceFields(name="Ghost")) is None
    assert crud.delete(created.id) is False
    assert len(store.list_services()) == size


def test_delete_blocked_while_active_appointments_reference_service(crud, store):
    # Haircut (id 1) has a confirmed appointment; the cancelled one does not count.
    with pytest.raises(ServiceInUseError) as exc_info:
        crud.delete("1")

    assert exc_info.value.appointment_ids == ["1"]
    assert crud.get("1") is not None


def test_delete_allowed_once_references_are_settled(crud, store):
    appointment = store.get_appointment("1")
    appointment.status = AppointmentStatus.completed

    assert crud.delete("1") is True
    assert crud.get("1") is None
    # Appointments keep their service name for history
    assert store.get_appointment("1").service_name == "Haircut"


def test_update_trims_name_like_create(crud):
    created = crud.create(ServiceFields(name="  Spa  ", price=Decimal("90"), duration=60))
    assert created.name == "Spa"

    updated = crud.update(created.id, ServiceFields(name="  Day Spa  "))
    assert updated.name == "Day Spa"

    with pytest.raises(ServiceValidationError):
        crud.update(created.id, ServiceFields(name="   "))
