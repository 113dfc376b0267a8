# backend/schemas/site_content.py
from typing import Dict, Optional

from pydantic import EmailStr, Field

from schemas.common import Payload, NameStr, UrlStr, CurrencyCode


# ---------- singletons ----------

class HeroSettingsUpdate(Payload):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    cta_text: Optional[str] = None
    cta_link: Optional[UrlStr] = None
    background_image: Optional[UrlStr] = None
    is_active: Optional[bool] = None


class SiteSettingsUpdate(Payload):
    site_name: Optional[NameStr] = None
    tagline: Optional[str] = None
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = None
    address: Optional[str] = None
    logo_url: Optional[UrlStr] = None
    default_currency: Optional[CurrencyCode] = None
    social_links: Optional[Dict[str, str]] = None


# ---------- footer ----------

class FooterSectionCreate(Payload):
    title: NameStr
    display_order: int = Field(default=0, ge=0)
    is_active: bool = True


class FooterSectionUpdate(Payload):
    title: Optional[NameStr] = None
    display_order: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None


class FooterLinkCreate(Payload):
    section_id: str
    label: NameStr
    url: UrlStr
    display_order: int = Field(default=0, ge=0)
    is_active: bool = True


class FooterLinkUpdate(Payload):
    section_id: Optional[str] = None
    label: Optional[NameStr] = None
    url: Optional[UrlStr] = None
    display_order: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None
