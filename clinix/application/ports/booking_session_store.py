from __future__ import annotations

from abc import ABC, abstractmethod

from clinix.application.use_cases.booking_wizard import BookingWizard


class BookingSessionStorePort(ABC):
    @abstractmethod
    def put(self, session_id: str, wizard: BookingWizard) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, session_id: str) -> BookingWizard | None:
        raise NotImplementedError

    @abstractmethod
    def discard(self, session_id: str) -> None:
        raise NotImplementedError
