"""Canonical text rendering for Value trees."""

from __future__ import annotations

import json
import math

from .values import Array, Bool, Integer, Null, Object, Real, Text, Value

POSITIVE_INFINITY_TEXT = "9e999"
NEGATIVE_INFINITY_TEXT = "-9e999"


def format_real(number: float) -> str:
    if math.isnan(number):
        return "null"
    if math.isinf(number):
        return POSITIVE_INFINITY_TEXT if number > 0 else NEGATIVE_INFINITY_TEXT
    # repr() is the shortest round-tripping form and always keeps a "." or an exponent.
    return repr(number)


def quote_text(text: str) -> str:
    return json.dumps(text, ensure_ascii=True)


def _format_scalar(value: Value) -> str:
    if isinstance(value, Null):
        return "null"
    if isinstance(value, Bool):
        return "true" if value.value else "false"
    if isinstance(value, Integer):
        return str(value.value)
    if isinstance(value, Real):
        return format_real(value.value)
    if isinstance(value, Text):
        return quote_text(value.value)
    raise TypeError(f"unsupported value type {type(value).__name__}")


def serialize(value: Value) -> str:
    """Render ``value`` as compact canonical JSON text."""
    if isinstance(value, Array):
        return "[" + ",".join(serialize(item) for item in value.items) + "]"
    if isinstance(value, Object):
        return "{" + ",".join(f"{quote_text(key)}:{serialize(item)}" for key, item in value.members.items()) + "}"
    return _format_scalar(value)


def serialize_pretty(value: Value, indent: int = 4) -> str:
    """Render ``value`` one member per line with the canonical scalar forms."""
    return _pretty(value, " " * max(0, indent), 0)


def _pretty(value: Value, unit: str, level: int) -> str:
    if isinstance(value, Array):
        if not value.items:
            return "[]"
        inner = unit * (level + 1)
        lines = [inner + _pretty(item, unit, level + 1) for item in value.items]
        return "[\n" + ",\n".join(lines) + "\n" + unit * level + "]"
    if isinstance(value, Object):
        if not value.members:
            return "{}"
        inner = unit * (level + 1)
        lines = [f"{inner}{quote_text(key)}: {_pretty(item, unit, level + 1)}" for key, item in value.members.items()]
        return "{\n" + ",\n".join(lines) + "\n" + unit * level + "}"
    return _format_scalar(value)
