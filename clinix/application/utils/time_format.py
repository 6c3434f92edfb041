from __future__ import annotations

import re
from datetime import date, time, timedelta

_DISPLAY_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*([ap])\.?\s*m\.?\s*$", re.IGNORECASE)


def format_display_time(value: time) -> str:
    """Format a time the way the booking pages show it: '9:00 AM', '12:30 PM'."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def parse_display_time(text: str) -> time | None:
    """Parse '10:00 AM' style strings. Returns None if the text is not a display time."""
    match = _DISPLAY_TIME_RE.match(text or "")
    if not match:
        return None

    hour = int(match.group(1))
    minute = int(match.group(2))
    if not 1 <= hour <= 12 or minute > 59:
        return None

    is_pm = match.group(3).lower() == "p"
    if hour == 12:
        hour = 0
    if is_pm:
        hour += 12
    return time(hour=hour, minute=minute)


def format_display_date(value: date) -> str:
    """Short label used in the date picker, e.g. 'Mon, Jan 5'."""
    return f"{value.strftime('%a')}, {value.strftime('%b')} {value.day}"


def upcoming_dates(reference_date: date, days: int) -> list[date]:
    """reference_date plus the following days-1 days."""
    return [reference_date + timedelta(days=offset) for offset in range(max(days, 0))]


def same_day(left: date, right: date) -> bool:
    return (left.year, left.month, left.day) == (right.year, right.month, right.day)
