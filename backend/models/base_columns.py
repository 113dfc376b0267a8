# backend/models/base_columns.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    # stored naive, always UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


def id_column() -> Column:
    return Column(String(36), primary_key=True, default=new_id)
