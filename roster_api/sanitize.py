"""
Conversion of DynamoDB-native values into plain JSON-compatible values.
"""

from __future__ import annotations

import base64
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from boto3.dynamodb.types import Binary


def _sanitize_bytes(value: bytes) -> str:
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError:
        return base64.b64encode(value).decode("ascii")


def _sanitize_set(value) -> list:
    items = [sanitize(item) for item in value]
    try:
        return sorted(items)
    except TypeError:
        return items


def sanitize(value: Any) -> Any:
    """Return ``value`` with store wrapper types replaced by plain scalars.

    Mappings and sequences are rebuilt recursively; ``None`` and other plain
    scalars are returned as-is.
    """
    if value is None:
        return None
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, Binary):
        return _sanitize_bytes(value.value)
    if isinstance(value, (bytes, bytearray)):
        return _sanitize_bytes(bytes(value))
    if isinstance(value, Mapping):
        return {key: sanitize(item) for key, item in value.items()}
    if isinstance(value, (set, frozenset)):
        return _sanitize_set(value)
    if isinstance(value, (list, tuple)):
        return [sanitize(item) for item in value]
    return value
