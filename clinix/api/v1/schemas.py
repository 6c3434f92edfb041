from __future__ import annotations

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from clinix.domain.entities.appointment import Appointment, AppointmentStatus
from clinix.domain.entities.auth_session import AuthSession
from clinix.domain.entities.booking_draft import BookingDraft, WizardStep
from clinix.domain.entities.service import Service, ServiceStatus
from clinix.domain.entities.time_slot import TimeSlot


class ServiceSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    price: Decimal
    duration: int
    category: str
    status: ServiceStatus


class ServiceCreateSchema(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    price: Decimal = Field(ge=0)
    duration: int = Field(gt=0)
    category: str = "Other"
    status: ServiceStatus = ServiceStatus.active


class ServiceUpdateSchema(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    price: Decimal | None = Field(default=None, ge=0)
    duration: int | None = Field(default=None, gt=0)
    category: str | None = None
    status: ServiceStatus | None = None


class AppointmentSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    client_name: str
    service_name: str
    service_id: str | None = None
    date: dt.date
    time: str
    duration: int
    status: AppointmentStatus
    notes: str | None = None
    client_phone: str | None = None
    client_email: str | None = None


class AppointmentStatusSchema(BaseModel):
    status: AppointmentStatus


class TimeSlotSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    time: str
    available: bool


class DateOptionSchema(BaseModel):
    value: dt.date
    display: str


class ClientDetailsSchema(BaseModel):
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    notes: str = ""


class SelectServiceSchema(BaseModel):
    service_id: str


class SelectDateSchema(BaseModel):
    date: dt.date


class SelectTimeSchema(BaseModel):
    slot_id: str


class BookingDraftSchema(BaseModel):
    service: ServiceSchema | None = None
    date: dt.date | None = None
    time_slot: TimeSlotSchema | None = None
    client: ClientDetailsSchema | None = None


class BookingStateSchema(BaseModel):
    session_id: str
    step: int
    step_name: str
    draft: BookingDraftSchema
    time_slots: list[TimeSlotSchema] = Field(default_factory=list)
    appointment_id: str | None = None


class LoginRequestSchema(BaseModel):
    username: str
    password: str


class UserSchema(BaseModel):
    username: str
    name: str
    role: str


class SessionSchema(BaseModel):
    authenticated: bool
    user: UserSchema | None = None


class DashboardSchema(BaseModel):
    total_appointments: int
    total_services: int
    total_clients: int
    appointments_today: int
    pending_appointments: int


class HomeSchema(BaseModel):
    business_name: str
    tagline: str
    services: list[ServiceSchema]


def service_to_schema(service: Service) -> ServiceSchema:
    return ServiceSchema.model_validate(service)


def appointment_to_schema(appointment: Appointment) -> AppointmentSchema:
    return AppointmentSchema.model_validate(appointment)


def session_to_schema(session: AuthSession | None) -> SessionSchema:
    if session is None:
        return SessionSchema(authenticated=False)
    return SessionSchema(
        authenticated=True,
        user=UserSchema(username=session.username, name=session.name, role=session.role),
    )


def draft_to_schema(draft: BookingDraft) -> BookingDraftSchema:
    return BookingDraftSchema(
        service=service_to_schema(draft.service) if draft.service else None,
        date=draft.date,
        time_slot=TimeSlotSchema.model_validate(draft.time_slot) if draft.time_slot else None,
        client=(
            ClientDetailsSchema(
                name=draft.client.name,
                phone=draft.client.phone,
                email=draft.client.email,
                notes=draft.client.notes,
            )
            if draft.client
            else None
        ),
    )


def booking_state_to_schema(
    session_id: str,
    step: WizardStep,
    draft: BookingDraft,
    time_slots: list[TimeSlot],
    appointment_id: str | None = None,
) -> BookingStateSchema:
    return BookingStateSchema(
        session_id=session_id,
        step=int(step),
        step_name=step.name.lower(),
        draft=draft_to_schema(draft),
        time_slots=[TimeSlotSchema.model_validate(slot) for slot in time_slots],
        appointment_id=appointment_id,
    )
