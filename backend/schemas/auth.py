# backend/schemas/auth.py
from datetime import datetime

from pydantic import BaseModel, EmailStr, constr

Password = constr(min_length=1, max_length=128)


class LoginPayload(BaseModel):
    email: EmailStr
    password: Password


class SessionOut(BaseModel):
    token: str
    email: str
    expires_at: datetime
