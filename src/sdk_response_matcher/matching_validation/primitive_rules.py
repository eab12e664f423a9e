"""Primitive kind rules for structural validation."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from decimal import Decimal

from sdk_response_matcher.schema_management.schema_models import PrimitiveKind

_HEX_PATTERN = re.compile(r"^0x[0-9a-fA-F]+$")
_DECIMAL_PATTERN = re.compile(r"^[0-9]+$")


def primitive_accepts(kind: PrimitiveKind, value: object) -> bool:
    """Return True when ``value`` is a valid representation of ``kind``."""
    if kind == PrimitiveKind.STRING:
        return isinstance(value, str)
    if kind == PrimitiveKind.BOOLEAN:
        return isinstance(value, bool)
    if kind == PrimitiveKind.NUMBER:
        return _is_number(value)
    if kind == PrimitiveKind.NUMERIC_STRING:
        return _is_numeric_string(value)
    if kind == PrimitiveKind.HEX_STRING:
        return isinstance(value, str) and _HEX_PATTERN.fullmatch(value) is not None
    return False


def describe_actual(value: object) -> str:
    """Render a value (or its structural type) for diagnostics."""
    if value is None or isinstance(value, str | bool | int | float):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, Sequence) and not isinstance(value, bytes):
        return "array"
    return type(value).__name__


def _is_number(value: object) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, int | float | Decimal)


def _is_numeric_string(value: object) -> bool:
    # Python SDKs return native ints for big-integer fields.
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value >= 0
    return isinstance(value, str) and _DECIMAL_PATTERN.fullmatch(value) is not None
