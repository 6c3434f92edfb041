from __future__ import annotations

import datetime as dt

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from clinix.api.v1.auth import require_admin
from clinix.api.v1.schemas import (
    AppointmentSchema,
    AppointmentStatusSchema,
    DashboardSchema,
    ServiceCreateSchema,
    ServiceSchema,
    ServiceUpdateSchema,
    appointment_to_schema,
    service_to_schema,
)
from clinix.application.exceptions import ServiceInUseError, ServiceValidationError
from clinix.application.use_cases.appointments import AppointmentUseCase
from clinix.application.use_cases.filters import ALL, filter_appointments, filter_services
from clinix.application.use_cases.service_crud import ServiceCrudUseCase, ServiceFields
from clinix.domain.entities.service import SERVICE_CATEGORIES
from clinix.wiring.dependencies import get_appointment_use_case, get_service_crud_use_case

router = APIRouter(prefix="/admin", dependencies=[Depends(require_admin)])


@router.get("", response_model=DashboardSchema)
def dashboard(appointments: AppointmentUseCase = Depends(get_appointment_use_case)) -> DashboardSchema:
    metrics = appointments.metrics(dt.date.today())
    return DashboardSchema(
        total_appointments=metrics.total_appointments,
        total_services=metrics.total_services,
        total_clients=metrics.total_clients,
        appointments_today=metrics.appointments_today,
        pending_appointments=metrics.pending_appointments,
    )


# --- Appointments ---


@router.get("/appointments", response_model=list[AppointmentSchema])
def list_appointments(
    date: dt.date | None = None,
    status_filter: str = Query(ALL, alias="status"),
    service_filter: str = Query(ALL, alias="service"),
    appointments: AppointmentUseCase = Depends(get_appointment_use_case),
) -> list[AppointmentSchema]:
    visible = filter_appointments(appointments.list_appointments(), date, status_filter, service_filter)
    return [appointment_to_schema(appointment) for appointment in visible]


@router.get("/appointments/{appointment_id}", response_model=AppointmentSchema)
def get_appointment(
    appointment_id: str,
    appointments: AppointmentUseCase = Depends(get_appointment_use_case),
) -> AppointmentSchema:
    appointment = appointments.get(appointment_id)
    if appointment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Appointment not found")
    return appointment_to_schema(appointment)


@router.patch("/appointments/{appointment_id}/status", response_model=AppointmentSchema)
def update_appointment_status(
    appointment_id: str,
    req: AppointmentStatusSchema,
    appointments: AppointmentUseCase = Depends(get_appointment_use_case),
) -> AppointmentSchema:
    appointment = appointments.update_status(appointment_id, req.status)
    if appointment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Appointment not found")
    return appointment_to_schema(appointment)


# --- Services ---


@router.get("/services", response_model=list[ServiceSchema])
def list_services(
    search: str = "",
    category: str = ALL,
    status_filter: str = Query(ALL, alias="status"),
    services: ServiceCrudUseCase = Depends(get_service_crud_use_case),
) -> list[ServiceSchema]:
    visible = filter_services(services.list_services(), search, category, status_filter)
    return [service_to_schema(service) for service in visible]


@router.get("/services/categories", response_model=list[str])
def list_categories() -> list[str]:
    return list(SERVICE_CATEGORIES)


@router.get("/services/{service_id}", response_model=ServiceSchema)
def get_service(
    service_id: str,
    services: ServiceCrudUseCase = Depends(get_service_crud_use_case),
) -> ServiceSchema:
    service = services.get(service_id)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return service_to_schema(service)


@router.post("/services", response_model=ServiceSchema, status_code=status.HTTP_201_CREATED)
def create_service(
    req: ServiceCreateSchema,
    services: ServiceCrudUseCase = Depends(get_service_crud_use_case),
) -> ServiceSchema:
    try:
        service = services.create(ServiceFields(**req.model_dump()))
    except ServiceValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return service_to_schema(service)


@router.put("/services/{service_id}", response_model=ServiceSchema)
def update_service(
    service_id: str,
    req: ServiceUpdateSchema,
    services: ServiceCrudUseCase = Depends(get_service_crud_use_case),
) -> ServiceSchema:
    try:
        service = services.update(service_id, ServiceFields(**req.model_dump(exclude_none=True)))
    except ServiceValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return service_to_schema(service)


@router.delete("/services/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_service(
    service_id: str,
    services: ServiceCrudUseCase = Depends(get_service_crud_use_case),
) -> Response:
    try:
        services.delete(service_id)
    except ServiceInUseError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
