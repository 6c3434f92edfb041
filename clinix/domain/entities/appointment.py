from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class AppointmentStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    completed = "completed"
    cancelled = "cancelled"


# Statuses that still occupy a slot in the schedule
ACTIVE_STATUSES = frozenset({AppointmentStatus.pending, AppointmentStatus.confirmed})


@dataclass
class Appointment:
    id: str
    client_name: str
    service_name: str
    date: date
    time: str  # display string, e.g. "10:00 AM"
    duration: int  # minutes
    status: AppointmentStatus = AppointmentStatus.pending
    service_id: str | None = None
    notes: str | None = None
    client_phone: str | None = None
    client_email: str | None = None

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES
