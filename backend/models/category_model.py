# backend/models/category_model.py
from sqlalchemy import Column, DateTime
from sqlalchemy.types import Unicode, UnicodeText

from database.session import Base
from models.base_columns import id_column, utcnow


class Category(Base):
    __tablename__ = "categories"

    id          = id_column()
    name        = Column(Unicode(120), nullable=False)
    slug        = Column(Unicode(120), nullable=False, unique=True)
    description = Column(UnicodeText)
    image_url   = Column(Unicode(500))
    created_at  = Column(DateTime, nullable=False, default=utcnow)
