# backend/models/currency_model.py
from sqlalchemy import Column, Float, Boolean, DateTime, String
from sqlalchemy.types import Unicode

from database.session import Base
from models.base_columns import id_column, utcnow


class Currency(Base):
    __tablename__ = "currencies"

    id            = id_column()
    code          = Column(String(3), nullable=False, unique=True)
    name          = Column(Unicode(80), nullable=False)
    symbol        = Column(Unicode(8), nullable=False)
    exchange_rate = Column(Float, nullable=False, default=1.0)
    is_default    = Column(Boolean, nullable=False, default=False)
    is_active     = Column(Boolean, nullable=False, default=True)
    created_at    = Column(DateTime, nullable=False, default=utcnow)
