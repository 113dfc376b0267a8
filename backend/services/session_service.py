# backend/services/session_service.py
"""
Admin sessions for the back office.

The storefront admin used to be a flag kept in the browser. Sessions now live
in the `admin_sessions` table: a login issues an opaque token with an expiry,
and every protected gateway call resolves that token server-side.
"""

import hmac
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import sessionmaker

from config.settings import Settings
from models.admin_session_model import AdminSessionRecord
from models.base_columns import utcnow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminSession:
    token: str
    email: str
    expires_at: datetime

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or utcnow()) >= self.expires_at


class AdminSessionService:
    def __init__(self, session_factory: sessionmaker, settings: Settings):
        self.session_factory = session_factory
        self.settings = settings

    def _credentials_match(self, email: str, password: str) -> bool:
        if not self.settings.admin_email or not self.settings.admin_password:
            logger.warning("Admin login attempted but ADMIN_EMAIL/ADMIN_PASSWORD are not configured")
            return False
        email_ok = hmac.compare_digest(email.strip().lower().encode(), self.settings.admin_email.lower().encode())
        password_ok = hmac.compare_digest(password.encode(), self.settings.admin_password.encode())
        return email_ok and password_ok

    def login(self, email: str, password: str) -> Optional[AdminSession]:
        if not self._credentials_match(email, password):
            logger.info(f"Rejected admin login for {email}")
            return None

        now = utcnow()
        record = AdminSessionRecord(
            token=secrets.token_urlsafe(32),
            email=self.settings.admin_email,
            created_at=now,
            expires_at=now + timedelta(minutes=self.settings.admin_session_ttl_minutes),
        )
        with self.session_factory() as db:
            db.add(record)
            db.commit()
        logger.info(f"Admin session opened for {record.email}, expires {record.expires_at.isoformat()}")
        return AdminSession(token=record.token, email=record.email, expires_at=record.expires_at)

    def verify(self, token: Optional[str]) -> Optional[AdminSession]:
        if not token:
            return None
        with self.session_factory() as db:
            record = db.get(AdminSessionRecord, token)
            if record is None:
                return None
            session = AdminSession(token=record.token, email=record.email, expires_at=record.expires_at)
            if session.is_expired():
                db.delete(record)
                db.commit()
                logger.info(f"Admin session for {session.email} expired")
                return None
            return session

    def logout(self, token: Optional[str]) -> bool:
        if not token:
            return False
        with self.session_factory() as db:
            deleted = (
                db.query(AdminSessionRecord)
                .filter(AdminSessionRecord.token == token)
                .delete(synchronize_session=False)
            )
            db.commit()
        return deleted > 0

    def purge_expired(self) -> int:
        with self.session_factory() as db:
            deleted = (
                db.query(AdminSessionRecord)
                .filter(AdminSessionRecord.expires_at <= utcnow())
                .delete(synchronize_session=False)
            )
            db.commit()
        if deleted:
            logger.info(f"Purged {deleted} expired admin sessions")
        return deleted


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Token part of an `Authorization: Bearer <token>` header, if any."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
