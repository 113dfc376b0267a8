# backend/models/admin_session_model.py
from sqlalchemy import Column, DateTime, String
from sqlalchemy.types import Unicode

from database.session import Base
from models.base_columns import utcnow


class AdminSessionRecord(Base):
    __tablename__ = "admin_sessions"

    token      = Column(String(64), primary_key=True)
    email      = Column(Unicode(255), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    expires_at = Column(DateTime, nullable=False, index=True)
