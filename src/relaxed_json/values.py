"""Value tree model and validators."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Union

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


@dataclass(frozen=True)
class Null:
    pass


@dataclass(frozen=True)
class Bool:
    value: bool


@dataclass(frozen=True)
class Integer:
    value: int


@dataclass(frozen=True)
class Real:
    value: float


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Array:
    items: tuple["Value", ...] = ()

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class Object:
    """Ordered members; the first-seen key position is kept on reassignment."""

    members: dict[str, "Value"] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.members)


Value = Union[Null, Bool, Integer, Real, Text, Array, Object]

NULL: Final[Null] = Null()


class ValueKind(str, Enum):
    NULL = "null"
    TRUE = "true"
    FALSE = "false"
    INTEGER = "integer"
    REAL = "real"
    TEXT = "text"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Value) -> ValueKind:
    if isinstance(value, Null):
        return ValueKind.NULL
    if isinstance(value, Bool):
        return ValueKind.TRUE if value.value else ValueKind.FALSE
    if isinstance(value, Integer):
        return ValueKind.INTEGER
    if isinstance(value, Real):
        # NaN has no strict-JSON spelling and serializes as null.
        return ValueKind.NULL if math.isnan(value.value) else ValueKind.REAL
    if isinstance(value, Text):
        return ValueKind.TEXT
    if isinstance(value, Array):
        return ValueKind.ARRAY
    if isinstance(value, Object):
        return ValueKind.OBJECT
    raise TypeError(f"unsupported value type {type(value).__name__}")


def integer_or_real(number: int) -> Integer | Real:
    """Wrap an integer, widening to Real outside the signed 64-bit range."""
    if INT64_MIN <= number <= INT64_MAX:
        return Integer(number)
    try:
        return Real(float(number))
    except OverflowError:
        return Real(math.inf if number > 0 else -math.inf)


def from_python(obj: object, *, where: str = "value") -> Value:
    """Build a Value tree from plain Python data."""
    if obj is None:
        return NULL
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, numbers.Integral):
        return integer_or_real(int(obj))
    if isinstance(obj, numbers.Real):
        return Real(float(obj))
    if isinstance(obj, str):
        return Text(obj)
    if isinstance(obj, (list, tuple)):
        return Array(tuple(from_python(item, where=f"{where}[{idx}]") for idx, item in enumerate(obj)))
    if isinstance(obj, dict):
        members: dict[str, Value] = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"{where} has non-string key {key!r}")
            members[key] = from_python(item, where=f"{where}.{key}")
        return Object(members)
    raise TypeError(f"{where} has unsupported Python type {type(obj).__name__}")


def to_python(value: Value) -> object:
    if isinstance(value, Null):
        return None
    if isinstance(value, (Bool, Integer, Real, Text)):
        return value.value
    if isinstance(value, Array):
        return [to_python(item) for item in value.items]
    if isinstance(value, Object):
        return {key: to_python(item) for key, item in value.members.items()}
    raise TypeError(f"unsupported value type {type(value).__name__}")


def validate_value(value: object, *, where: str = "value") -> None:
    if isinstance(value, Null):
        return
    if isinstance(value, Bool):
        if not isinstance(value.value, bool):
            raise TypeError(f"{where} Bool holds {type(value.value).__name__}")
        return
    if isinstance(value, Integer):
        if isinstance(value.value, bool) or not isinstance(value.value, int):
            raise TypeError(f"{where} Integer holds {type(value.value).__name__}")
        if not INT64_MIN <= value.value <= INT64_MAX:
            raise TypeError(f"{where} Integer is outside the signed 64-bit range")
        return
    if isinstance(value, Real):
        if not isinstance(value.value, float):
            raise TypeError(f"{where} Real holds {type(value.value).__name__}")
        return
    if isinstance(value, Text):
        if not isinstance(value.value, str):
            raise TypeError(f"{where} Text holds {type(value.value).__name__}")
        return
    if isinstance(value, Array):
        for idx, item in enumerate(value.items):
            validate_value(item, where=f"{where}[{idx}]")
        return
    if isinstance(value, Object):
        for key, item in value.members.items():
            if not isinstance(key, str):
                raise TypeError(f"{where} has non-string key {key!r}")
            validate_value(item, where=f"{where}.{key}")
        return
    raise TypeError(f"{where} has unsupported runtime type {type(value).__name__}")
