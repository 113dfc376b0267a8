# backend/gateway/records.py
from typing import Any, Dict, Optional

from sqlalchemy import inspect as sa_inspect


def row_to_dict(obj) -> Dict[str, Any]:
    """Plain column values of an ORM row, keyed by column name."""
    mapper = sa_inspect(obj).mapper
    return {attr.key: getattr(obj, attr.key) for attr in mapper.column_attrs}


def pick(obj, *fields: str) -> Optional[Dict[str, Any]]:
    # display-only subset of a related row (None when the relation is empty)
    if obj is None:
        return None
    return {f: getattr(obj, f) for f in fields}
