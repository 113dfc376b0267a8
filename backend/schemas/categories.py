# backend/schemas/categories.py
from typing import Optional

from schemas.common import Payload, NameStr, SlugStr, UrlStr


class CategoryCreate(Payload):
    name: NameStr
    slug: SlugStr
    description: Optional[str] = None
    image_url: Optional[UrlStr] = None


class CategoryUpdate(Payload):
    name: Optional[NameStr] = None
    slug: Optional[SlugStr] = None
    description: Optional[str] = None
    image_url: Optional[UrlStr] = None
