# backend/routers/auth_router.py
from fastapi import APIRouter, Depends, Header
from typing import Optional

from gateway.cors import cors_json, preflight
from gateway.dependencies import get_session_service
from schemas.auth import LoginPayload, SessionOut
from services.session_service import AdminSession, AdminSessionService, bearer_token

router = APIRouter(prefix="/auth", tags=["auth"])


def _session_out(session: AdminSession):
    return cors_json({"success": True, "data": SessionOut(**session.__dict__).model_dump()})


def _unauthorized(detail: str):
    return cors_json({"detail": detail}, 401)


@router.options("/{path:path}")
def auth_preflight(path: str):
    return preflight()


@router.post("/login")
def login(body: LoginPayload, sessions: AdminSessionService = Depends(get_session_service)):
    session = sessions.login(body.email, body.password)
    if session is None:
        return _unauthorized("Invalid email or password")
    return _session_out(session)


@router.get("/session")
def current_session(
    authorization: Optional[str] = Header(default=None),
    sessions: AdminSessionService = Depends(get_session_service),
):
    session = sessions.verify(bearer_token(authorization))
    if session is None:
        return _unauthorized("Session expired or invalid")
    return _session_out(session)


@router.post("/logout")
def logout(
    authorization: Optional[str] = Header(default=None),
    sessions: AdminSessionService = Depends(get_session_service),
):
    if not sessions.logout(bearer_token(authorization)):
        return _unauthorized("Session expired or invalid")
    return cors_json({"success": True, "message": "Logged out"})
