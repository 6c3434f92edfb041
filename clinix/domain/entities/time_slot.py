from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeSlot:
    id: str
    time: str  # display string, e.g. "9:00 AM"
    available: bool = True
