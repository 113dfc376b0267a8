# backend/models/product_model.py
from sqlalchemy import Column, Integer, Float, Boolean, DateTime, ForeignKey, JSON, String
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from database.session import Base
from models.base_columns import id_column, utcnow


class Product(Base):
    __tablename__ = "products"

    id                  = id_column()
    category_id         = Column(String(36), ForeignKey("categories.id", ondelete="SET NULL"), index=True)
    name                = Column(Unicode(255), nullable=False)
    slug                = Column(Unicode(255))
    description         = Column(UnicodeText)
    price               = Column(Float, nullable=False)
    compare_at_price    = Column(Float)
    stock_quantity      = Column(Integer, nullable=False, default=0)
    low_stock_threshold = Column(Integer, nullable=False, default=5)
    image_url           = Column(Unicode(500))
    images              = Column(JSON, nullable=False, default=list)
    is_active           = Column(Boolean, nullable=False, default=True)
    is_featured         = Column(Boolean, nullable=False, default=False)
    created_at          = Column(DateTime, nullable=False, default=utcnow)
    updated_at          = Column(DateTime, default=utcnow, onupdate=utcnow)

    category = relationship("Category")
