# backend/models/review_model.py
from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey, String, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from database.session import Base
from models.base_columns import id_column, utcnow


class Review(Base):
    __tablename__ = "reviews"

    id             = id_column()
    product_id     = Column(String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    customer_name  = Column(Unicode(255), nullable=False)
    customer_email = Column(Unicode(255))
    rating         = Column(Integer, nullable=False)
    title          = Column(Unicode(255))
    comment        = Column(UnicodeText, nullable=False, default="")
    is_approved    = Column(Boolean, nullable=False, default=False)
    created_at     = Column(DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5"),
    )

    product = relationship("Product")
