"""Scalar functions exposed to a host query engine.

Arguments arrive either as plain scalars or as structured results of an
earlier call. The two cases are kept apart with the :class:`Scalar` and
:class:`Structured` wrappers, so text that happens to look like JSON is
never reinterpreted as structure.

SQL ``NULL`` inputs (``None``) propagate: a function whose document argument
is ``None`` returns ``None``.

Structured results compare equal to their canonical text, so
``normalize("{a:1}") == '{"a":1}'`` holds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Union

from .errors import ParseError, PathError
from .parser import parse
from .path import ROOT, evaluate_path
from .serializer import serialize, serialize_pretty
from .values import NULL, Array, Bool, Real, Text, Value, integer_or_real, kind_of

logger = logging.getLogger(__name__)

ScalarValue = Union[str, int, float, bool, None]


@dataclass(frozen=True)
class Scalar:
    """A plain host value; text is kept as text."""

    value: ScalarValue = None


@dataclass(frozen=True, eq=False)
class Structured:
    """A prior structured result, embedded as a live subtree.

    Compares equal to its canonical text, and to any other result with the
    same canonical text.
    """

    value: Value

    @classmethod
    def from_text(cls, text: str) -> "Structured":
        return cls(_parse_logged(text))

    @cached_property
    def text(self) -> str:
        return serialize(self.value)

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Structured):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)


Argument = Union[Scalar, Structured]
Document = Union[str, Structured, Scalar, None]


def as_argument(obj: object) -> Argument:
    if isinstance(obj, (Scalar, Structured)):
        return obj
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return Scalar(obj)
    raise TypeError(f"unsupported argument type {type(obj).__name__}")


def _leaf(arg: Argument) -> Value:
    if isinstance(arg, Structured):
        return arg.value
    raw = arg.value
    if raw is None:
        return NULL
    if isinstance(raw, bool):
        return Bool(raw)
    if isinstance(raw, int):
        return integer_or_real(raw)
    if isinstance(raw, float):
        return Real(raw)
    return Text(raw)


def _parse_logged(text: str) -> Value:
    try:
        return parse(text)
    except ParseError as exc:
        logger.debug("rejected malformed JSON input: %s", exc)
        raise


def _tree(doc: Document) -> Value | None:
    """Resolve a document argument to a tree; ``None`` stays ``None``."""
    if doc is None:
        return None
    if isinstance(doc, Structured):
        return doc.value
    if isinstance(doc, Scalar):
        if isinstance(doc.value, str):
            return _parse_logged(doc.value)
        return None if doc.value is None else _leaf(doc)
    if isinstance(doc, str):
        return _parse_logged(doc)
    raise TypeError(f"unsupported document type {type(doc).__name__}")


def _resolve(doc: Document, path: str | None) -> Value | None:
    root = _tree(doc)
    if root is None or path is None:
        return None
    try:
        found = evaluate_path(root, path)
    except PathError as exc:
        logger.debug("rejected malformed path: %s", exc)
        raise
    if found is None:
        logger.debug("path %r did not resolve", path)
    return found


def normalize(text: Document) -> Structured | None:
    """Parse relaxed JSON and return its canonical form."""
    if isinstance(text, Structured):
        return text
    root = _tree(text)
    if root is None:
        return None
    return Structured(root)


def array(*args: object) -> Structured:
    """Build a JSON array from the arguments in order."""
    return Structured(Array(tuple(_leaf(as_argument(arg)) for arg in args)))


def array_length(text: Document, path: str | None = ROOT) -> int | None:
    """Element count of the array at ``path``.

    A resolved non-array value has length ``0``; a path that does not resolve
    returns ``None``.
    """
    found = _resolve(text, path)
    if found is None:
        return None
    if isinstance(found, Array):
        return len(found.items)
    return 0


def extract(text: Document, path: str | None) -> Structured | None:
    found = _resolve(text, path)
    if found is None:
        return None
    return Structured(found)


def value_type(text: Document, path: str | None = ROOT) -> str | None:
    found = _resolve(text, path)
    if found is None:
        return None
    return kind_of(found).value


def valid(text: Document) -> bool:
    if text is None:
        return False
    try:
        tree = _tree(text)
    except ParseError:
        return False
    return tree is not None


def quote(value: object) -> Structured:
    """A scalar argument as a JSON value; structured arguments pass through."""
    arg = as_argument(value)
    if isinstance(arg, Structured):
        return arg
    return Structured(_leaf(arg))


def pretty(text: Document, indent: int = 4) -> str | None:
    root = _tree(text)
    if root is None:
        return None
    return serialize_pretty(root, indent)
