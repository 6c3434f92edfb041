from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from clinix.api.v1.schemas import LoginRequestSchema, SessionSchema, session_to_schema
from clinix.application.use_cases.auth_gate import AuthGate
from clinix.wiring.dependencies import get_auth_gate

router = APIRouter()


def require_admin(gate: AuthGate = Depends(get_auth_gate)) -> AuthGate:
    if not gate.is_authenticated():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Login required")
    return gate


@router.post("/login", response_model=SessionSchema)
async def login(req: LoginRequestSchema, gate: AuthGate = Depends(get_auth_gate)) -> SessionSchema:
    if not await gate.login(req.username, req.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")
    return session_to_schema(gate.current_user())


@router.post("/logout", response_model=SessionSchema)
def logout(gate: AuthGate = Depends(get_auth_gate)) -> SessionSchema:
    gate.logout()
    return session_to_schema(None)


@router.get("/login/session", response_model=SessionSchema)
def current_session(gate: AuthGate = Depends(get_auth_gate)) -> SessionSchema:
    return session_to_schema(gate.current_user())
