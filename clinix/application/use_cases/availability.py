from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta

from clinix.application.ports.entity_store import EntityStorePort
from clinix.application.utils.time_format import format_display_time, parse_display_time, same_day
from clinix.domain.entities.time_slot import TimeSlot


class AvailabilityUseCase:
    """Derives a day's time slots from working hours and the appointments already booked."""

    def __init__(
        self,
        store: EntityStorePort,
        opening_hour: int = 9,
        closing_hour: int = 17,
        interval_minutes: int = 60,
    ) -> None:
        self._store = store
        self._opening_hour = opening_hour
        self._closing_hour = closing_hour
        self._interval_minutes = interval_minutes
        self._logger = logging.getLogger(__name__)

    def slots_for(self, day: date, duration_minutes: int) -> list[TimeSlot]:
        closing = datetime.combine(day, time(hour=self._closing_hour))
        busy = self._busy_ranges(day)

        slots: list[TimeSlot] = []
        current = datetime.combine(day, time(hour=self._opening_hour))
        index = 1
        while current < closing:
            end = current + timedelta(minutes=duration_minutes)
            available = end <= closing and self._is_free(current, end, busy)
            slots.append(
                TimeSlot(
                    id=f"t{index}",
                    time=format_display_time(current.time()),
                    available=available,
                )
            )
            current += timedelta(minutes=self._interval_minutes)
            index += 1

        return slots

    def _busy_ranges(self, day: date) -> list[tuple[datetime, datetime]]:
        ranges: list[tuple[datetime, datetime]] = []
        for appointment in self._store.list_appointments():
            if not appointment.is_active or not same_day(appointment.date, day):
                continue
            start_time = parse_display_time(appointment.time)
            if start_time is None:
                self._logger.warning(
                    "Skipping appointment with unreadable time",
                    extra={"appointment_id": appointment.id, "reason": appointment.time},
                )
                continue
            start = datetime.combine(day, start_time)
            ranges.append((start, start + timedelta(minutes=appointment.duration)))
        return ranges

    @staticmethod
    def _is_free(start: datetime, end: datetime, busy: list[tuple[datetime, datetime]]) -> bool:
        for busy_start, busy_end in busy:
            if not (end <= busy_start or start >= busy_end):
                return False
        return True
