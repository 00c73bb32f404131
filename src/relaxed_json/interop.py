"""Conversion of numeric Value trees to jax arrays."""

from __future__ import annotations

import jax.numpy as jnp

from .values import Array, Bool, Integer, Real, Value


def shape_of(value: Value, *, where: str = "value") -> tuple[int, ...]:
    """Shape of a rectangular numeric tree, raising TypeError otherwise."""
    if isinstance(value, (Bool, Integer, Real)):
        return ()
    if not isinstance(value, Array):
        raise TypeError(f"{where} is not numeric: {type(value).__name__}")
    if not value.items:
        return (0,)
    shapes = {shape_of(item, where=f"{where}[{idx}]") for idx, item in enumerate(value.items)}
    if len(shapes) != 1:
        raise TypeError(f"{where} is ragged")
    return (len(value.items),) + shapes.pop()


def _nested(value: Value) -> object:
    if isinstance(value, Array):
        return [_nested(item) for item in value.items]
    return value.value


def to_jax_array(value: Value):
    shape_of(value)
    return jnp.asarray(_nested(value))
