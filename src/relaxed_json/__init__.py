"""relaxed-json public API."""

from .catalog import CATALOG, FunctionSpec, call, lookup
from .errors import ArityError, ParseError, PathError, RelaxedJSONError, UnknownFunctionError
from .functions import (
    Argument,
    Scalar,
    Structured,
    array,
    array_length,
    as_argument,
    extract,
    normalize,
    pretty,
    quote,
    valid,
    value_type,
)
from .lexer import Token, iter_tokens, tokenize
from .parser import parse
from .path import compile_path, evaluate_path
from .serializer import serialize, serialize_pretty
from .values import Array, Bool, Integer, Null, Object, Real, Text, Value, ValueKind, from_python, kind_of, to_python

try:
    from .interop import to_jax_array
except ModuleNotFoundError as exc:
    if exc.name and exc.name.startswith("jax"):
        _jax_import_error = exc

        def to_jax_array(*_args, **_kwargs):
            raise ModuleNotFoundError(
                "jax is required for to_jax_array(). Install the jax extra first."
            ) from _jax_import_error

    else:
        raise

__all__ = [
    "tokenize",
    "iter_tokens",
    "Token",
    "parse",
    "serialize",
    "serialize_pretty",
    "compile_path",
    "evaluate_path",
    "normalize",
    "array",
    "array_length",
    "extract",
    "value_type",
    "valid",
    "quote",
    "pretty",
    "as_argument",
    "Argument",
    "Scalar",
    "Structured",
    "CATALOG",
    "FunctionSpec",
    "call",
    "lookup",
    "to_jax_array",
    "Value",
    "ValueKind",
    "Null",
    "Bool",
    "Integer",
    "Real",
    "Text",
    "Array",
    "Object",
    "kind_of",
    "from_python",
    "to_python",
    "RelaxedJSONError",
    "ParseError",
    "PathError",
    "ArityError",
    "UnknownFunctionError",
]
