# backend/schemas/currencies.py
from typing import Optional

from pydantic import Field, constr

from schemas.common import Payload, CurrencyCode

Symbol = constr(strip_whitespace=True, min_length=1, max_length=8)


class CurrencyCreate(Payload):
    code: CurrencyCode
    name: constr(strip_whitespace=True, min_length=1, max_length=80)
    symbol: Symbol
    exchange_rate: float = Field(default=1.0, gt=0)
    is_default: bool = False
    is_active: bool = True


class CurrencyUpdate(Payload):
    code: Optional[CurrencyCode] = None
    name: Optional[constr(strip_whitespace=True, min_length=1, max_length=80)] = None
    symbol: Optional[Symbol] = None
    exchange_rate: Optional[float] = Field(default=None, gt=0)
    is_default: Optional[bool] = None
    is_active: Optional[bool] = None
