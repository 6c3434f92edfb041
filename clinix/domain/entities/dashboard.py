from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DashboardMetrics:
    total_appointments: int
    total_services: int
    total_clients: int
    appointments_today: int
    pending_appointments: int
