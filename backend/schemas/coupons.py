# backend/schemas/coupons.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, constr

from schemas.common import Payload

CouponCode = constr(strip_whitespace=True, to_upper=True, min_length=2, max_length=40)
DiscountType = Literal["percentage", "fixed"]


class CouponCreate(Payload):
    code: CouponCode
    discount_value: float = Field(gt=0)
    discount_type: DiscountType = "percentage"
    description: Optional[str] = None
    min_order_amount: float = Field(default=0, ge=0)
    max_uses: Optional[int] = Field(default=None, gt=0)
    is_active: bool = True
    starts_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None


class CouponUpdate(Payload):
    code: Optional[CouponCode] = None
    discount_value: Optional[float] = Field(default=None, gt=0)
    discount_type: Optional[DiscountType] = None
    description: Optional[str] = None
    min_order_amount: Optional[float] = Field(default=None, ge=0)
    max_uses: Optional[int] = Field(default=None, gt=0)
    used_count: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None
    starts_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
