from __future__ import annotations

import logging
import time
from collections import OrderedDict
from collections.abc import Callable

from clinix.application.ports.booking_session_store import BookingSessionStorePort
from clinix.application.use_cases.booking_wizard import BookingWizard


class MemoryBookingSessionStore(BookingSessionStorePort):
    """
    Wizards keyed by session id.
    Sessions idle longer than ttl_seconds expire, and past max_sessions the
    least recently used one is dropped.
    """

    def __init__(
        self,
        ttl_seconds: float = 3600.0,
        max_sessions: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._wizards: OrderedDict[str, tuple[BookingWizard, float]] = OrderedDict()
        self._ttl_seconds = ttl_seconds
        self._max_sessions = max_sessions
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def put(self, session_id: str, wizard: BookingWizard) -> None:
        self._evict_expired()
        self._wizards[session_id] = (wizard, self._clock())
        self._wizards.move_to_end(session_id)
        while len(self._wizards) > self._max_sessions:
            dropped, _ = self._wizards.popitem(last=False)
            self._logger.info("Booking session evicted", extra={"session_id": dropped, "reason": "limit"})

    def get(self, session_id: str) -> BookingWizard | None:
        self._evict_expired()
        entry = self._wizards.get(session_id)
        if entry is None:
            return None
        wizard, _ = entry
        self._wizards[session_id] = (wizard, self._clock())
        self._wizards.move_to_end(session_id)
        return wizard

    def discard(self, session_id: str) -> None:
        self._wizards.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._wizards)

    def _evict_expired(self) -> None:
        cutoff = self._clock() - self._ttl_seconds
        # Entries are kept in last-touched order, so expired ones sit at the front.
        while self._wizards:
            session_id, (_, touched_at) = next(iter(self._wizards.items()))
            if touched_at > cutoff:
                break
            del self._wizards[session_id]
            self._logger.info("Booking session expired", extra={"session_id": session_id, "reason": "ttl"})
