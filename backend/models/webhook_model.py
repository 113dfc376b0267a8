# backend/models/webhook_model.py
from sqlalchemy import Column, Boolean, DateTime, JSON
from sqlalchemy.types import Unicode

from database.session import Base
from models.base_columns import id_column, utcnow


class Webhook(Base):
    __tablename__ = "webhooks"

    id         = id_column()
    name       = Column(Unicode(120), nullable=False)
    url        = Column(Unicode(500), nullable=False)
    events     = Column(JSON, nullable=False, default=list)
    secret     = Column(Unicode(255))
    is_active  = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
