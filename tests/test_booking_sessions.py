"""
Tests for the booking session registry: expiry, size cap and discard.
"""

from __future__ import annotations

from clinix.application.use_cases.booking_wizard import BookingWizard
from clinix.infrastructure.store.booking_session_store import MemoryBookingSessionStore


class _Clock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def _wizard() -> BookingWizard:
    return BookingWizard(slot_provider=lambda day, duration: [])


def test_discard_removes_session():
    sessions = MemoryBookingSessionStore()
    sessions.put("a", _wizard())

    sessions.discard("a")
    sessions.discard("a")

    assert sessions.get("a") is None
    assert len(sessions) == 0


def test_idle_sessions_expire():
    clock = _Clock()
    sessions = MemoryBookingSessionStore(ttl_seconds=60, clock=clock)
    sessions.put("old", _wizard())
    clock.now += 30
    sessions.put("new", _wizard())

    clock.now += 45
    assert sessions.get("old") is None
    assert sessions.get("new") is not None
    assert len(sessions) == 1


def test_access_keeps_session_alive():
    clock = _Clock()
    sessions = MemoryBookingSessionStore(ttl_seconds=60, clock=clock)
    wizard = _wizard()
    sessions.put("a", wizard)

    for _ in range(5):
        clock.now += 50
        assert sessions.get("a") is wizard


def test_least_recently_used_dropped_past_limit():
    sessions = MemoryBookingSessionStore(max_sessions=2)
    sessions.put("a", _wizard())
    sessions.put("b", _wizard())
    sessions.get("a")
    sessions.put("c", _wizard())

    assert len(sessions) == 2
    assert sessions.get("b") is None
    assert sessions.get("a") is not None
    assert sessions.get("c") is not None
