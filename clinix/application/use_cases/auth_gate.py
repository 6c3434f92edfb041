from __future__ import annotations

import asyncio
import hmac
import json
import logging
from collections.abc import Sequence

from clinix.application.ports.client_storage import ClientStoragePort
from clinix.domain.entities.auth_session import AuthSession, UserCredential

AUTH_STORAGE_KEY = "authToken"


class AuthGate:
    """
    Credential check against a static user list.

    The session is kept as one JSON object under AUTH_STORAGE_KEY, so
    is_authenticated() and current_user() always read the same record.
    """

    def __init__(
        self,
        storage: ClientStoragePort,
        users: Sequence[UserCredential],
        token_value: str = "mock-jwt-token",
        delay_seconds: float = 0.8,
    ) -> None:
        self._storage = storage
        self._users = list(users)
        self._token_value = token_value
        self._delay_seconds = delay_seconds
        self._logger = logging.getLogger(__name__)

    async def login(self, username: str, password: str) -> bool:
        # Stand-in for a network round trip.
        if self._delay_seconds > 0:
            await asyncio.sleep(self._delay_seconds)

        user = self._find_user(username, password)
        if user is None:
            self._logger.info("Login rejected", extra={"username": username, "reason": "bad_credentials"})
            return False

        session = AuthSession(username=user.username, name=user.name, role=user.role, token=self._token_value)
        self._storage.set_item(AUTH_STORAGE_KEY, _serialize_session(session))
        self._logger.info("Login succeeded", extra={"username": user.username})
        return True

    def logout(self) -> None:
        session = self.current_user()
        self._storage.remove_item(AUTH_STORAGE_KEY)
        if session is not None:
            self._logger.info("Logged out", extra={"username": session.username})

    def is_authenticated(self) -> bool:
        return self.current_user() is not None

    def current_user(self) -> AuthSession | None:
        raw = self._storage.get_item(AUTH_STORAGE_KEY)
        if not raw:
            return None
        session = _deserialize_session(raw)
        if session is None:
            self._logger.warning("Discarding unreadable auth session", extra={"reason": "corrupt"})
        return session

    def _find_user(self, username: str, password: str) -> UserCredential | None:
        for user in self._users:
            if _same(user.username, username) and _same(user.password, password):
                return user
        return None


def _serialize_session(session: AuthSession) -> str:
    return json.dumps(
        {
            "token": session.token,
            "username": session.username,
            "name": session.name,
            "role": session.role,
        }
    )


def _deserialize_session(raw: str) -> AuthSession | None:
    try:
        data = json.loads(raw)
        return AuthSession(
            username=data["username"],
            name=data["name"],
            role=data["role"],
            token=data["token"],
        )
    except (json.JSONDecodeError, KeyError, TypeError):
        return None


def _same(expected: str, given: str) -> bool:
    return hmac.compare_digest(expected.encode("utf-8"), (given or "").encode("utf-8"))
