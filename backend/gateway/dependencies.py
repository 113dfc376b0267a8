# backend/gateway/dependencies.py
from functools import lru_cache

from config.settings import get_settings
from database.session import SessionLocal
from gateway.dispatcher import ResourceGateway
from services.session_service import AdminSessionService


@lru_cache
def get_session_service() -> AdminSessionService:
    return AdminSessionService(SessionLocal, get_settings())


@lru_cache
def get_resource_gateway() -> ResourceGateway:
    settings = get_settings()
    return ResourceGateway(
        SessionLocal,
        get_session_service(),
        require_admin=settings.admin_session_required,
    )
