# backend/models/payment_method_model.py
from sqlalchemy import Column, Integer, Boolean, JSON, String
from sqlalchemy.types import Unicode, UnicodeText

from database.session import Base
from models.base_columns import id_column


class PaymentMethod(Base):
    __tablename__ = "payment_methods"

    id            = id_column()
    name          = Column(Unicode(120), nullable=False)
    code          = Column(String(40), nullable=False, unique=True)
    description   = Column(UnicodeText)
    is_enabled    = Column(Boolean, nullable=False, default=False)
    config        = Column(JSON)
    display_order = Column(Integer, nullable=False, default=0)
