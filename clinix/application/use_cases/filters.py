from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from clinix.application.utils.time_format import same_day
from clinix.domain.entities.appointment import Appointment
from clinix.domain.entities.service import Service

ALL = "all"


def filter_appointments(
    appointments: Iterable[Appointment],
    selected_date: date | None = None,
    status_filter: str = ALL,
    service_filter: str = ALL,
) -> list[Appointment]:
    """
    Appointments matching every active predicate, in input order.
    A None date and "all" for status/service disable that predicate.
    """
    return [
        appointment
        for appointment in appointments
        if (selected_date is None or same_day(appointment.date, selected_date))
        and (status_filter == ALL or appointment.status == status_filter)
        and (service_filter == ALL or appointment.service_name == service_filter)
    ]


def filter_services(
    services: Iterable[Service],
    search_term: str = "",
    category_filter: str = ALL,
    status_filter: str = ALL,
) -> list[Service]:
    """
    Services matching every active predicate, in input order.
    The search term is a case-insensitive substring of name or description.
    """
    needle = (search_term or "").lower()
    return [
        service
        for service in services
        if (not needle or needle in service.name.lower() or needle in service.description.lower())
        and (category_filter == ALL or service.category == category_filter)
        and (status_filter == ALL or service.status == status_filter)
    ]
