from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import IntEnum

from clinix.domain.entities.service import Service
from clinix.domain.entities.time_slot import TimeSlot


class WizardStep(IntEnum):
    SELECT_SERVICE = 1
    SELECT_DATE = 2
    SELECT_TIME = 3
    ENTER_DETAILS = 4
    CONFIRMED = 5


@dataclass(frozen=True)
class ClientDetails:
    name: str
    phone: str
    email: str
    notes: str = ""

    def missing_fields(self) -> list[str]:
        """Names of required fields left blank."""
        return [
            field_name
            for field_name in ("name", "phone", "email")
            if not getattr(self, field_name).strip()
        ]

    def invalid_fields(self) -> list[str]:
        """Blank required fields, plus 'email' when it has no '@'."""
        invalid = self.missing_fields()
        if "email" not in invalid and "@" not in self.email:
            invalid.append("email")
        return invalid


@dataclass(frozen=True)
class BookingDraft:
    service: Service | None = None
    date: date | None = None
    time_slot: TimeSlot | None = None
    client: ClientDetails | None = None

    @property
    def is_empty(self) -> bool:
        return self.service is None and self.date is None and self.time_slot is None and self.client is None
