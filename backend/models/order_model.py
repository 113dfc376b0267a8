# backend/models/order_model.py
from sqlalchemy import Column, Integer, Float, DateTime, ForeignKey, JSON, String
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from database.session import Base
from models.base_columns import id_column, utcnow


class Order(Base):
    __tablename__ = "orders"

    id               = id_column()
    order_number     = Column(Unicode(40), unique=True)
    customer_name    = Column(Unicode(255), nullable=False)
    customer_email   = Column(Unicode(255), nullable=False)
    customer_phone   = Column(Unicode(40))
    shipping_address = Column(JSON)
    total            = Column(Float, nullable=False, default=0)
    currency         = Column(String(3), nullable=False, default="USD")
    status           = Column(String(20), nullable=False, default="pending")  # pending / processing / shipped / delivered / cancelled / refunded
    payment_method   = Column(Unicode(60))
    notes            = Column(UnicodeText)
    created_at       = Column(DateTime, nullable=False, default=utcnow)
    updated_at       = Column(DateTime, default=utcnow, onupdate=utcnow)

    items = relationship("OrderItem", cascade="all, delete-orphan", back_populates="order", order_by="OrderItem.id")


class OrderItem(Base):
    __tablename__ = "order_items"

    id          = id_column()
    order_id    = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id  = Column(String(36), ForeignKey("products.id", ondelete="SET NULL"), index=True)
    quantity    = Column(Integer, nullable=False, default=1)
    unit_price  = Column(Float, nullable=False, default=0)
    total_price = Column(Float, nullable=False, default=0)

    order   = relationship("Order", back_populates="items")
    product = relationship("Product")
