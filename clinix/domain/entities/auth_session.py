from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthSession:
    username: str
    name: str
    role: str
    token: str


@dataclass(frozen=True)
class UserCredential:
    username: str
    password: str
    name: str
    role: str
