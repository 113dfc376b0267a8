# backend/schemas/common.py
from pydantic import BaseModel, ConfigDict, constr

NameStr = constr(strip_whitespace=True, min_length=1, max_length=255)
SlugStr = constr(strip_whitespace=True, min_length=1, max_length=120, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
UrlStr = constr(strip_whitespace=True, min_length=1, max_length=500)
CurrencyCode = constr(strip_whitespace=True, to_upper=True, min_length=3, max_length=3)


class Payload(BaseModel):
    """Base for write payloads: unknown keys are rejected instead of forwarded."""

    model_config = ConfigDict(extra="forbid")
