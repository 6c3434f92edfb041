from __future__ import annotations

import logging
from datetime import date

from clinix.application.ports.booking_session_store import BookingSessionStorePort
from clinix.application.ports.client_storage import ClientStoragePort
from clinix.application.ports.entity_store import EntityStorePort
from clinix.application.use_cases.appointments import AppointmentUseCase
from clinix.application.use_cases.auth_gate import AuthGate
from clinix.application.use_cases.availability import AvailabilityUseCase
from clinix.application.use_cases.booking_wizard import BookingWizard
from clinix.application.use_cases.service_crud import ServiceCrudUseCase
from clinix.core.config import settings
from clinix.domain.entities.auth_session import UserCredential
from clinix.infrastructure.storage.json_storage import JsonClientStorage
from clinix.infrastructure.storage.memory_storage import MemoryClientStorage
from clinix.infrastructure.store.booking_session_store import MemoryBookingSessionStore
from clinix.infrastructure.store.memory_store import MemoryEntityStore
from clinix.infrastructure.store.seed_data import seed_appointments, seed_services


_entity_store: EntityStorePort | None = None
_client_storage: ClientStoragePort | None = None
_booking_sessions: BookingSessionStorePort | None = None

logger = logging.getLogger(__name__)


def get_entity_store() -> EntityStorePort:
    global _entity_store
    if _entity_store is None:
        if settings.SEED_MOCK_DATA:
            _entity_store = MemoryEntityStore(seed_services(), seed_appointments(date.today()))
        else:
            _entity_store = MemoryEntityStore()
    return _entity_store


def get_client_storage() -> ClientStoragePort:
    global _client_storage
    if _client_storage is None:
        if settings.STORAGE_PROVIDER.lower() == "json":
            logger.info("Using JsonClientStorage dir=%s", settings.STORAGE_DIR)
            _client_storage = JsonClientStorage(data_dir=settings.STORAGE_DIR)
        else:
            _client_storage = MemoryClientStorage()
    return _client_storage


def get_booking_sessions() -> BookingSessionStorePort:
    global _booking_sessions
    if _booking_sessions is None:
        _booking_sessions = MemoryBookingSessionStore(
            ttl_seconds=settings.BOOKING_SESSION_TTL_MINUTES * 60,
            max_sessions=settings.BOOKING_SESSION_LIMIT,
        )
    return _booking_sessions


def get_users() -> list[UserCredential]:
    return [
        UserCredential(
            username=settings.ADMIN_USERNAME,
            password=settings.ADMIN_PASSWORD,
            name=settings.ADMIN_NAME,
            role=settings.ADMIN_ROLE,
        )
    ]


def get_auth_gate() -> AuthGate:
    return AuthGate(
        storage=get_client_storage(),
        users=get_users(),
        token_value=settings.AUTH_TOKEN_VALUE,
        delay_seconds=settings.LOGIN_DELAY_MS / 1000,
    )


def get_availability_use_case() -> AvailabilityUseCase:
    return AvailabilityUseCase(
        store=get_entity_store(),
        opening_hour=settings.OPENING_HOUR,
        closing_hour=settings.CLOSING_HOUR,
        interval_minutes=settings.SLOT_INTERVAL_MINUTES,
    )


def get_service_crud_use_case() -> ServiceCrudUseCase:
    return ServiceCrudUseCase(store=get_entity_store())


def get_appointment_use_case() -> AppointmentUseCase:
    return AppointmentUseCase(store=get_entity_store(), availability=get_availability_use_case())


def build_booking_wizard(session_id: str | None = None) -> BookingWizard:
    return BookingWizard(slot_provider=get_availability_use_case().slots_for, session_id=session_id)


def reset_state() -> None:
    """Drop every process-wide store so the next request starts from fresh seed data."""
    global _entity_store, _client_storage, _booking_sessions
    _entity_store = None
    _client_storage = None
    _booking_sessions = None
