# backend/models/coupon_model.py
from sqlalchemy import Column, Integer, Float, Boolean, DateTime, String
from sqlalchemy.types import Unicode

from database.session import Base
from models.base_columns import id_column, utcnow


class Coupon(Base):
    __tablename__ = "coupons"

    id               = id_column()
    code             = Column(String(40), nullable=False, unique=True)
    description      = Column(Unicode(255))
    discount_type    = Column(String(20), nullable=False, default="percentage")  # percentage / fixed
    discount_value   = Column(Float, nullable=False)
    min_order_amount = Column(Float, nullable=False, default=0)
    max_uses         = Column(Integer)
    used_count       = Column(Integer, nullable=False, default=0)
    is_active        = Column(Boolean, nullable=False, default=True)
    starts_at        = Column(DateTime)
    expires_at       = Column(DateTime)
    created_at       = Column(DateTime, nullable=False, default=utcnow)
