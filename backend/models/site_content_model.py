# backend/models/site_content_model.py
from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey, JSON, String
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from database.session import Base
from models.base_columns import id_column, utcnow


class HeroSettings(Base):
    __tablename__ = "hero_settings"

    id               = id_column()
    title            = Column(Unicode(255))
    subtitle         = Column(UnicodeText)
    cta_text         = Column(Unicode(80))
    cta_link         = Column(Unicode(500))
    background_image = Column(Unicode(500))
    is_active        = Column(Boolean, nullable=False, default=True)
    singleton        = Column(Boolean, nullable=False, default=True, unique=True)  # at most one row
    updated_at       = Column(DateTime, default=utcnow, onupdate=utcnow)


class SiteSettings(Base):
    __tablename__ = "site_settings"

    id               = id_column()
    site_name        = Column(Unicode(120))
    tagline          = Column(Unicode(255))
    contact_email    = Column(Unicode(255))
    contact_phone    = Column(Unicode(40))
    address          = Column(UnicodeText)
    logo_url         = Column(Unicode(500))
    default_currency = Column(String(3))
    social_links     = Column(JSON)
    singleton        = Column(Boolean, nullable=False, default=True, unique=True)
    updated_at       = Column(DateTime, default=utcnow, onupdate=utcnow)


class FooterSection(Base):
    __tablename__ = "footer_sections"

    id            = id_column()
    title         = Column(Unicode(120), nullable=False)
    display_order = Column(Integer, nullable=False, default=0)
    is_active     = Column(Boolean, nullable=False, default=True)
    created_at    = Column(DateTime, nullable=False, default=utcnow)

    links = relationship("FooterLink", back_populates="section", cascade="all, delete-orphan")


class FooterLink(Base):
    __tablename__ = "footer_links"

    id            = id_column()
    section_id    = Column(String(36), ForeignKey("footer_sections.id", ondelete="CASCADE"), nullable=False, index=True)
    label         = Column(Unicode(120), nullable=False)
    url           = Column(Unicode(500), nullable=False)
    display_order = Column(Integer, nullable=False, default=0)
    is_active     = Column(Boolean, nullable=False, default=True)
    created_at    = Column(DateTime, nullable=False, default=utcnow)

    section = relationship("FooterSection", back_populates="links")
