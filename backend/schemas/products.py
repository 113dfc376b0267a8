# backend/schemas/products.py
from typing import List, Optional

from pydantic import Field

from schemas.common import Payload, NameStr, SlugStr, UrlStr


class ProductCreate(Payload):
    name: NameStr
    price: float = Field(ge=0)
    category_id: Optional[str] = None
    slug: Optional[SlugStr] = None
    description: Optional[str] = None
    compare_at_price: Optional[float] = Field(default=None, ge=0)
    stock_quantity: int = Field(default=0, ge=0)
    low_stock_threshold: int = Field(default=5, ge=0)
    image_url: Optional[UrlStr] = None
    images: List[UrlStr] = []
    is_active: bool = True
    is_featured: bool = False


class ProductUpdate(Payload):
    name: Optional[NameStr] = None
    price: Optional[float] = Field(default=None, ge=0)
    category_id: Optional[str] = None
    slug: Optional[SlugStr] = None
    description: Optional[str] = None
    compare_at_price: Optional[float] = Field(default=None, ge=0)
    stock_quantity: Optional[int] = Field(default=None, ge=0)
    low_stock_threshold: Optional[int] = Field(default=None, ge=0)
    image_url: Optional[UrlStr] = None
    images: Optional[List[UrlStr]] = None
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None
