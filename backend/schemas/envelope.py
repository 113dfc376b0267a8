# backend/schemas/envelope.py
from typing import Any, Dict, Optional

from pydantic import BaseModel, field_validator


class GatewayRequest(BaseModel):
    """Request envelope posted to the site-management endpoint."""

    action: Optional[str] = None
    resource: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    id: Optional[str] = None
    filters: Optional[Dict[str, Any]] = None

    @field_validator("action", "resource", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, v):
        if isinstance(v, bool):
            return v
        if isinstance(v, int):
            return str(v)
        if isinstance(v, str) and not v.strip():
            return None
        return v


class GatewayResponse(BaseModel):
    """Uniform response envelope; `success` tells which of data/message/error is set."""

    success: bool
    data: Any = None
    message: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: Any = None) -> "GatewayResponse":
        return cls(success=True, data=data)

    @classmethod
    def done(cls, message: str) -> "GatewayResponse":
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, error: str) -> "GatewayResponse":
        return cls(success=False, error=error)

    def to_payload(self) -> Dict[str, Any]:
        # `data` stays present (possibly null) on data results
        return self.model_dump(exclude_unset=True)
