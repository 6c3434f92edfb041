from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from clinix.domain.entities.appointment import Appointment, AppointmentStatus
from clinix.domain.entities.service import Service, ServiceStatus


def seed_services() -> list[Service]:
    return [
        Service(
            id="1",
            name="Haircut",
            description="Professional haircut with styling",
            price=Decimal("50"),
            duration=30,
            category="Hair",
            status=ServiceStatus.active,
        ),
        Service(
            id="2",
            name="Manicure",
            description="Basic manicure with polish",
            price=Decimal("35"),
            duration=45,
            category="Nails",
            status=ServiceStatus.active,
        ),
        Service(
            id="3",
            name="Facial",
            description="Deep cleansing facial treatment",
            price=Decimal("75"),
            duration=60,
            category="Skin",
            status=ServiceStatus.active,
        ),
        Service(
            id="4",
            name="Hair Coloring",
            description="Full hair coloring service",
            price=Decimal("120"),
            duration=90,
            category="Hair",
            status=ServiceStatus.inactive,
        ),
    ]


def seed_appointments(today: date) -> list[Appointment]:
    """Mock schedule around `today`."""
    return [
        Appointment(
            id="1",
            client_name="Jane Smith",
            service_name="Haircut",
            service_id="1",
            date=today,
            time="10:00 AM",
            duration=30,
            status=AppointmentStatus.confirmed,
            client_phone="555-123-4567",
            client_email="jane@example.com",
            notes="First time client",
        ),
        Appointment(
            id="2",
            client_name="John Doe",
            service_name="Massage",
            date=today,
            time="2:00 PM",
            duration=60,
            status=AppointmentStatus.pending,
            client_phone="555-987-6543",
            client_email="john@example.com",
        ),
        Appointment(
            id="3",
            client_name="Alice Johnson",
            service_name="Facial",
            service_id="3",
            date=today + timedelta(days=1),
            time="11:30 AM",
            duration=45,
            status=AppointmentStatus.confirmed,
            client_phone="555-555-5555",
            client_email="alice@example.com",
        ),
        Appointment(
            id="4",
            client_name="Bob Williams",
            service_name="Manicure",
            service_id="2",
            date=today - timedelta(days=1),
            time="3:15 PM",
            duration=45,
            status=AppointmentStatus.completed,
            client_phone="555-222-3333",
            client_email="bob@example.com",
        ),
        Appointment(
            id="5",
            client_name="Carol Taylor",
            service_name="Haircut",
            service_id="1",
            date=today,
            time="4:30 PM",
            duration=30,
            status=AppointmentStatus.cancelled,
            client_phone="555-444-7777",
            client_email="carol@example.com",
            notes="Reschedule needed",
        ),
    ]
