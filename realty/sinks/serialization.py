"""Shared serialization utilities for sinks."""

from decimal import Decimal
from typing import Any


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary.

    Listings go through their own ``to_dict()`` so the ``kind`` tag is kept.
    """
    if hasattr(obj, "to_dict"):
        return serialize_value(obj.to_dict())
    elif isinstance(obj, dict):
        return serialize_value(obj)
    else:
        return {"value": str(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
