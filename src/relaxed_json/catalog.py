"""Catalog of functions registered with a host engine under their SQL names."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from .errors import ArityError, UnknownFunctionError
from .functions import array, array_length, extract, normalize, pretty, quote, valid, value_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FunctionSpec:
    name: str
    func: Callable[..., object]
    min_args: int
    max_args: int | None
    note: str

    def accepts(self, count: int) -> bool:
        if count < self.min_args:
            return False
        return self.max_args is None or count <= self.max_args


CATALOG: Final[tuple[FunctionSpec, ...]] = (
    FunctionSpec(
        name="json",
        func=normalize,
        min_args=1,
        max_args=1,
        note="canonical form of a relaxed JSON document",
    ),
    FunctionSpec(
        name="json_array",
        func=array,
        min_args=0,
        max_args=None,
        note="array of the arguments, structured arguments embedded",
    ),
    FunctionSpec(
        name="json_array_length",
        func=array_length,
        min_args=1,
        max_args=2,
        note="element count at a path, 0 for non-arrays, NULL when unresolved",
    ),
    FunctionSpec(
        name="json_extract",
        func=extract,
        min_args=2,
        max_args=2,
        note="sub-value at a path",
    ),
    FunctionSpec(
        name="json_type",
        func=value_type,
        min_args=1,
        max_args=2,
        note="type name of the value at a path",
    ),
    FunctionSpec(
        name="json_valid",
        func=valid,
        min_args=1,
        max_args=1,
        note="whether the argument parses",
    ),
    FunctionSpec(
        name="json_quote",
        func=quote,
        min_args=1,
        max_args=1,
        note="scalar argument as a JSON value",
    ),
    FunctionSpec(
        name="json_pretty",
        func=pretty,
        min_args=1,
        max_args=2,
        note="indented canonical form",
    ),
)

_BY_NAME: Final[dict[str, FunctionSpec]] = {spec.name: spec for spec in CATALOG}


def lookup(name: str) -> FunctionSpec:
    try:
        return _BY_NAME[name.lower()]
    except KeyError:
        raise UnknownFunctionError(f"no such function: {name}") from None


def call(name: str, *args: object) -> object:
    spec = lookup(name)
    if not spec.accepts(len(args)):
        logger.debug("arity mismatch for %s: %d argument(s)", spec.name, len(args))
        raise ArityError(f"wrong number of arguments to function {spec.name}()")
    return spec.func(*args)
