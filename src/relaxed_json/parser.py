"""Recursive-descent parser building Value trees from relaxed JSON."""

from __future__ import annotations

import math
import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Final

from .errors import ParseError
from .lexer import Token, iter_tokens
from .values import NULL, Array, Bool, INT64_MAX, Integer, Object, Real, Text, Value, integer_or_real

MAX_DEPTH: Final[int] = max(1, int(os.environ.get("RELAXED_JSON_MAX_DEPTH", "256")))

_VALUE_START = ("LBRACE", "LBRACK", "STRING", "NUMBER", "BAREWORD")
_KEY_KINDS = ("STRING", "IDENT", "BAREWORD")
# Decimal integers with more digits than this are outside int64.
_INT64_DIGITS: Final[int] = len(str(INT64_MAX))


def number_value(text: str) -> Integer | Real:
    """Convert NUMBER token text to its Value."""
    negative = text.startswith("-")
    body = text[1:] if text[:1] in {"+", "-"} else text

    if body == "Infinity":
        return Real(-math.inf if negative else math.inf)
    if body == "NaN":
        return Real(math.nan)
    if body[:2] in {"0x", "0X"}:
        magnitude = int(body[2:], 16)
        return integer_or_real(-magnitude if negative else magnitude)
    if any(ch in body for ch in ".eE"):
        return Real(float(text))
    if len(body) > _INT64_DIGITS:
        return Real(float(text))
    return integer_or_real(int(text))


@dataclass
class _Parser:
    tokens: Iterator[Token]
    max_depth: int = MAX_DEPTH
    depth: int = 0
    _current: Token = field(init=False)

    def __post_init__(self) -> None:
        self._current = next(self.tokens)

    def parse_document(self) -> Value:
        value = self._parse_value()
        self._expect("EOF")
        return value

    def _peek(self) -> Token:
        return self._current

    def _advance(self) -> Token:
        tok = self._current
        if tok.kind != "EOF":
            self._current = next(self.tokens)
        return tok

    def _expect(self, kind: str) -> Token:
        tok = self._peek()
        if tok.kind != kind:
            self._error(tok, expected=(kind,))
        return self._advance()

    def _match(self, kind: str) -> bool:
        if self._peek().kind == kind:
            self._advance()
            return True
        return False

    def _error(self, tok: Token | None = None, *, message: str | None = None, expected: tuple[str, ...] = ()) -> None:
        token = tok if tok is not None else self._peek()
        detail = message if message is not None else "Unexpected token"
        normalized_expected = tuple(dict.fromkeys(expected))
        if token.kind == "EOF":
            found = "EOF"
        elif token.text:
            found = f"{token.kind}({token.text})"
        else:
            found = token.kind
        raise ParseError(detail, token.pos, token.end, expected=normalized_expected, found=found)

    def _enter(self, tok: Token) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            self._error(tok, message=f"Nesting depth exceeds {self.max_depth}")

    def _leave(self) -> None:
        self.depth -= 1

    def _parse_value(self) -> Value:
        tok = self._peek()

        if tok.kind == "LBRACE":
            return self._parse_object()

        if tok.kind == "LBRACK":
            return self._parse_array()

        if tok.kind == "STRING":
            self._advance()
            return Text(tok.text)

        if tok.kind == "NUMBER":
            self._advance()
            return number_value(tok.text)

        if tok.kind == "BAREWORD":
            self._advance()
            if tok.text == "null":
                return NULL
            return Bool(tok.text == "true")

        self._error(tok, expected=_VALUE_START)
        raise AssertionError("unreachable")

    def _parse_key(self) -> str:
        tok = self._peek()
        if tok.kind in _KEY_KINDS or (tok.kind == "NUMBER" and tok.text in {"Infinity", "NaN"}):
            self._advance()
            return tok.text
        self._error(tok, expected=("STRING", "IDENT", "RBRACE"))
        raise AssertionError("unreachable")

    def _parse_object(self) -> Object:
        self._enter(self._expect("LBRACE"))
        members: dict[str, Value] = {}
        if not self._match("RBRACE"):
            while True:
                key = self._parse_key()
                self._expect("COLON")
                # Re-assignment keeps the first position and the last value.
                members[key] = self._parse_value()
                if self._match("COMMA"):
                    if self._match("RBRACE"):
                        break
                    continue
                if self._peek().kind != "RBRACE":
                    self._error(expected=("COMMA", "RBRACE"))
                self._advance()
                break
        self._leave()
        return Object(members)

    def _parse_array(self) -> Array:
        self._enter(self._expect("LBRACK"))
        items: list[Value] = []
        if not self._match("RBRACK"):
            while True:
                items.append(self._parse_value())
                if self._match("COMMA"):
                    if self._match("RBRACK"):
                        break
                    continue
                if self._peek().kind != "RBRACK":
                    self._error(expected=("COMMA", "RBRACK"))
                self._advance()
                break
        self._leave()
        return Array(tuple(items))


def parse(source: str, *, max_depth: int | None = None) -> Value:
    """Parse one relaxed JSON document into a Value tree."""
    parser = _Parser(tokens=iter_tokens(source), max_depth=MAX_DEPTH if max_depth is None else max_depth)
    return parser.parse_document()
