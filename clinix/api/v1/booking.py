from __future__ import annotations

import logging
import uuid
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Response, status

from clinix.api.v1.schemas import (
    BookingStateSchema,
    ClientDetailsSchema,
    DateOptionSchema,
    SelectDateSchema,
    SelectServiceSchema,
    SelectTimeSchema,
    booking_state_to_schema,
)
from clinix.application.exceptions import SlotUnavailableError
from clinix.application.ports.booking_session_store import BookingSessionStorePort
from clinix.application.ports.entity_store import EntityStorePort
from clinix.application.use_cases.appointments import AppointmentUseCase
from clinix.application.use_cases.booking_wizard import BookingWizard
from clinix.application.utils.time_format import format_display_date, upcoming_dates
from clinix.core.config import settings
from clinix.domain.entities.booking_draft import ClientDetails
from clinix.wiring.dependencies import (
    build_booking_wizard,
    get_appointment_use_case,
    get_booking_sessions,
    get_entity_store,
)

router = APIRouter(prefix="/booking")
logger = logging.getLogger(__name__)


def _state(session_id: str, wizard: BookingWizard, appointment_id: str | None = None) -> BookingStateSchema:
    return booking_state_to_schema(session_id, wizard.step, wizard.draft, wizard.time_slots, appointment_id)


def _get_wizard(session_id: str, sessions: BookingSessionStorePort) -> BookingWizard:
    wizard = sessions.get(session_id)
    if wizard is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking session not found")
    return wizard


def _applied_or_conflict(applied: bool, session_id: str, wizard: BookingWizard) -> BookingStateSchema:
    state = _state(session_id, wizard)
    if not applied:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=state.model_dump(mode="json"))
    return state


@router.post("", response_model=BookingStateSchema, status_code=status.HTTP_201_CREATED)
def start_booking(sessions: BookingSessionStorePort = Depends(get_booking_sessions)) -> BookingStateSchema:
    session_id = uuid.uuid4().hex
    wizard = build_booking_wizard(session_id)
    sessions.put(session_id, wizard)
    logger.info("Booking session started", extra={"session_id": session_id})
    return _state(session_id, wizard)


@router.get("/{session_id}", response_model=BookingStateSchema)
def get_booking(
    session_id: str,
    sessions: BookingSessionStorePort = Depends(get_booking_sessions),
) -> BookingStateSchema:
    return _state(session_id, _get_wizard(session_id, sessions))


@router.get("/{session_id}/dates", response_model=list[DateOptionSchema])
def list_dates(
    session_id: str,
    sessions: BookingSessionStorePort = Depends(get_booking_sessions),
) -> list[DateOptionSchema]:
    _get_wizard(session_id, sessions)
    return [
        DateOptionSchema(value=day, display=format_display_date(day))
        for day in upcoming_dates(date.today(), settings.BOOKING_DAYS_AHEAD)
    ]


@router.post("/{session_id}/service", response_model=BookingStateSchema)
def select_service(
    session_id: str,
    req: SelectServiceSchema,
    sessions: BookingSessionStorePort = Depends(get_booking_sessions),
    store: EntityStorePort = Depends(get_entity_store),
) -> BookingStateSchema:
    wizard = _get_wizard(session_id, sessions)
    service = store.get_service(req.service_id)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return _applied_or_conflict(wizard.select_service(service), session_id, wizard)


@router.post("/{session_id}/date", response_model=BookingStateSchema)
def select_date(
    session_id: str,
    req: SelectDateSchema,
    sessions: BookingSessionStorePort = Depends(get_booking_sessions),
) -> BookingStateSchema:
    wizard = _get_wizard(session_id, sessions)
    return _applied_or_conflict(wizard.select_date(req.date), session_id, wizard)


@router.post("/{session_id}/time", response_model=BookingStateSchema)
def select_time(
    session_id: str,
    req: SelectTimeSchema,
    sessions: BookingSessionStorePort = Depends(get_booking_sessions),
) -> BookingStateSchema:
    wizard = _get_wizard(session_id, sessions)
    slot = wizard.find_slot(req.slot_id)
    if slot is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Time slot not found")
    return _applied_or_conflict(wizard.select_time(slot), session_id, wizard)


@router.post("/{session_id}/details", response_model=BookingStateSchema)
def submit_details(
    session_id: str,
    req: ClientDetailsSchema,
    sessions: BookingSessionStorePort = Depends(get_booking_sessions),
    appointments: AppointmentUseCase = Depends(get_appointment_use_case),
) -> BookingStateSchema:
    wizard = _get_wizard(session_id, sessions)
    details = ClientDetails(name=req.name, phone=req.phone, email=req.email, notes=req.notes)

    with appointments.booking_guard():
        state = _applied_or_conflict(wizard.submit_details(details), session_id, wizard)
        try:
            appointment = appointments.record_booking(wizard.draft)
        except SlotUnavailableError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    if appointment is not None:
        state.appointment_id = appointment.id
    return state


@router.post("/{session_id}/back", response_model=BookingStateSchema)
def step_back(
    session_id: str,
    sessions: BookingSessionStorePort = Depends(get_booking_sessions),
) -> BookingStateSchema:
    wizard = _get_wizard(session_id, sessions)
    return _applied_or_conflict(wizard.back(), session_id, wizard)


@router.post("/{session_id}/restart", response_model=BookingStateSchema)
def restart_booking(
    session_id: str,
    sessions: BookingSessionStorePort = Depends(get_booking_sessions),
) -> BookingStateSchema:
    wizard = _get_wizard(session_id, sessions)
    return _applied_or_conflict(wizard.restart(), session_id, wizard)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def abandon_booking(
    session_id: str,
    sessions: BookingSessionStorePort = Depends(get_booking_sessions),
) -> Response:
    sessions.discard(session_id)
    logger.info("Booking session discarded", extra={"session_id": session_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
