"""Path expressions (``$``, ``.name``, ``[n]``) over Value trees."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Final, Union

from .errors import PathError
from .lexer import is_ident_continue, is_ident_start
from .values import Array, Object, Value

_PATH_CACHE_MAX: Final[int] = max(1, int(os.environ.get("RELAXED_JSON_PATH_CACHE_MAX", "256")))

ROOT: Final[str] = "$"


@dataclass(frozen=True)
class Key:
    name: str


@dataclass(frozen=True)
class Index:
    """Array position; with ``from_end`` the position counts back from the length."""

    index: int
    from_end: bool = False


Selector = Union[Key, Index]


def _scan_digits(path: str, start: int) -> int:
    i = start
    while i < len(path) and path[i].isdigit() and path[i].isascii():
        i += 1
    return i


def _parse_key(path: str, start: int) -> tuple[Key, int]:
    if start < len(path) and path[start] == '"':
        close = path.find('"', start + 1)
        if close < 0:
            raise PathError("Unterminated quoted key", path, start)
        return Key(path[start + 1 : close]), close + 1

    if start >= len(path) or not is_ident_start(path[start]):
        raise PathError("Expected a key name after '.'", path, start)
    i = start + 1
    while i < len(path) and is_ident_continue(path[i]):
        i += 1
    return Key(path[start:i]), i


def _parse_index(path: str, start: int) -> tuple[Index, int]:
    i = start
    from_end = False
    if path.startswith("#-", i):
        from_end = True
        i += 2

    digits_start = i
    i = _scan_digits(path, i)
    if i == digits_start:
        raise PathError("Array index must be a non-negative integer", path, digits_start)
    index = int(path[digits_start:i])

    if i >= len(path) or path[i] != "]":
        raise PathError("Expected ']'", path, i)
    return Index(index, from_end=from_end), i + 1


@lru_cache(maxsize=_PATH_CACHE_MAX)
def compile_path(path: str) -> tuple[Selector, ...]:
    """Parse path text into selectors, raising PathError when malformed."""
    if not path.startswith(ROOT):
        raise PathError("Path must start with '$'", path, 0)

    selectors: list[Selector] = []
    i = len(ROOT)
    while i < len(path):
        ch = path[i]
        if ch == ".":
            key, i = _parse_key(path, i + 1)
            selectors.append(key)
        elif ch == "[":
            index, i = _parse_index(path, i + 1)
            selectors.append(index)
        else:
            raise PathError(f"Unexpected character {ch!r}", path, i)
    return tuple(selectors)


def _select(value: Value, selector: Selector) -> Value | None:
    if isinstance(selector, Key):
        if isinstance(value, Object):
            return value.members.get(selector.name)
        return None

    if not isinstance(value, Array):
        return None
    position = len(value.items) - selector.index if selector.from_end else selector.index
    if 0 <= position < len(value.items):
        return value.items[position]
    return None


def evaluate_path(root: Value, path: str | Sequence[Selector]) -> Value | None:
    """Navigate ``root`` along ``path``; ``None`` means the path does not resolve."""
    selectors = compile_path(path) if isinstance(path, str) else path
    current: Value | None = root
    for selector in selectors:
        current = _select(current, selector)
        if current is None:
            return None
    return current
