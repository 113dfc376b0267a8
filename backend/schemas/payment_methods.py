# backend/schemas/payment_methods.py
from typing import Any, Dict, Optional

from pydantic import Field

from schemas.common import Payload, NameStr


# the set of methods is fixed; only presentation and the enabled flag change
class PaymentMethodUpdate(Payload):
    name: Optional[NameStr] = None
    description: Optional[str] = None
    is_enabled: Optional[bool] = None
    config: Optional[Dict[str, Any]] = None
    display_order: Optional[int] = Field(default=None, ge=0)
