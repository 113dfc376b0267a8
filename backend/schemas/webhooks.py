# backend/schemas/webhooks.py
from typing import List, Optional

from schemas.common import Payload, NameStr, UrlStr


class WebhookCreate(Payload):
    name: NameStr
    url: UrlStr
    events: List[str] = []
    secret: Optional[str] = None
    is_active: bool = True


class WebhookUpdate(Payload):
    name: Optional[NameStr] = None
    url: Optional[UrlStr] = None
    events: Optional[List[str]] = None
    secret: Optional[str] = None
    is_active: Optional[bool] = None
