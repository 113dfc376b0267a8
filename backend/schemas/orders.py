# backend/schemas/orders.py
from typing import Literal

from schemas.common import Payload

OrderStatus = Literal["pending", "processing", "shipped", "delivered", "cancelled", "refunded"]


class OrderStatusUpdate(Payload):
    status: OrderStatus
