"""Tokenization for relaxed JSON input."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .errors import ParseError


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    pos: int
    end: int


_SINGLE_TOKENS = {
    "{": "LBRACE",
    "}": "RBRACE",
    "[": "LBRACK",
    "]": "RBRACK",
    ":": "COLON",
    ",": "COMMA",
}

_WHITESPACE = frozenset(" \t\n\r\f\v\u00a0\u2028\u2029\ufeff")
_LINE_BREAKS = frozenset("\n\r\u2028\u2029")
_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_IDENT_CHARS = _ASCII_LETTERS | _DIGITS | {"_", "$"}

_BAREWORDS = frozenset({"true", "false", "null"})
_NUMERIC_WORDS = ("Infinity", "NaN")

_SIMPLE_ESCAPES = {
    '"': '"',
    "'": "'",
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}


def is_ident_start(ch: str) -> bool:
    return ch in _ASCII_LETTERS or ch == "_" or ch == "$"


def is_ident_continue(ch: str) -> bool:
    return is_ident_start(ch) or ch in _DIGITS


def _scan_while(source: str, start: int, allowed: frozenset[str]) -> int:
    i = start
    while i < len(source) and source[i] in allowed:
        i += 1
    return i


def _invalid_number(source: str, start: int, end: int) -> ParseError:
    end = max(end, start + 1)
    return ParseError(f"Invalid numeric literal {source[start:end]!r}", start, end)


def _scan_number(source: str, start: int) -> int:
    i = start
    if source[i] in {"+", "-"}:
        i += 1
        if i >= len(source):
            raise _invalid_number(source, start, i)

    for word in _NUMERIC_WORDS:
        if source.startswith(word, i):
            i += len(word)
            if i < len(source) and is_ident_continue(source[i]):
                raise _invalid_number(source, start, i + 1)
            return i

    if source[i] == "0" and i + 1 < len(source) and source[i + 1] in {"x", "X"}:
        i += 2
        digits_start = i
        i = _scan_while(source, i, _HEX_DIGITS)
        if i == digits_start:
            raise _invalid_number(source, start, i)
    else:
        int_start = i
        i = _scan_while(source, i, _DIGITS)
        int_digits = i - int_start
        if int_digits > 1 and source[int_start] == "0":
            raise ParseError(f"Leading zeros in numeric literal {source[start:i]!r}", start, i)

        if i < len(source) and source[i] == ".":
            i += 1
            frac_start = i
            i = _scan_while(source, i, _DIGITS)
            if int_digits == 0 and i == frac_start:
                raise _invalid_number(source, start, i)
        elif int_digits == 0:
            raise _invalid_number(source, start, i)

        if i < len(source) and source[i] in {"e", "E"}:
            i += 1
            if i < len(source) and source[i] in {"+", "-"}:
                i += 1
            exp_start = i
            i = _scan_while(source, i, _DIGITS)
            if i == exp_start:
                raise _invalid_number(source, start, i)

    if i < len(source) and (is_ident_continue(source[i]) or source[i] == "."):
        raise _invalid_number(source, start, i + 1)
    return i


def _read_hex(source: str, start: int, count: int, escape_pos: int, kind: str) -> int:
    end = start + count
    digits = source[start:end]
    if len(digits) != count or not all(ch in _HEX_DIGITS for ch in digits):
        raise ParseError(f"Invalid \\{kind} escape", escape_pos, min(end, len(source)))
    return int(digits, 16)


def _parse_escaped_codepoint(source: str, start: int) -> tuple[str, int]:
    escape_pos = start - 1
    if start >= len(source):
        raise ParseError("Escape sequence is incomplete at end of input", escape_pos, start)

    esc = source[start]
    if esc in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[esc], start + 1

    if esc == "0":
        if start + 1 < len(source) and source[start + 1] in _DIGITS:
            raise ParseError("Octal escape sequences are not allowed", escape_pos, start + 2)
        return "\0", start + 1

    if esc == "x":
        return chr(_read_hex(source, start + 1, 2, escape_pos, "x")), start + 3

    if esc == "u":
        codepoint = _read_hex(source, start + 1, 4, escape_pos, "u")
        end = start + 5
        if 0xD800 <= codepoint <= 0xDBFF and source.startswith("\\u", end):
            low = _read_hex(source, end + 2, 4, end, "u")
            if 0xDC00 <= low <= 0xDFFF:
                codepoint = 0x10000 + ((codepoint - 0xD800) << 10) + (low - 0xDC00)
                end += 6
        return chr(codepoint), end

    # Line continuation.
    if esc == "\r":
        if start + 1 < len(source) and source[start + 1] == "\n":
            return "", start + 2
        return "", start + 1
    if esc in _LINE_BREAKS:
        return "", start + 1

    raise ParseError(f"Unknown escape sequence \\{esc}", escape_pos, start + 1)


def _scan_string(source: str, start: int) -> tuple[str, int]:
    quote = source[start]
    assert quote in {'"', "'"}
    i = start + 1
    out: list[str] = []
    while i < len(source):
        ch = source[i]
        if ch == quote:
            return "".join(out), i + 1
        if ch == "\\":
            escaped, i = _parse_escaped_codepoint(source, i + 1)
            out.append(escaped)
            continue
        if ch in {"\n", "\r"}:
            raise ParseError("Unescaped line break in string literal", i, i + 1)
        out.append(ch)
        i += 1
    raise ParseError("Unterminated string literal", start, len(source))


def _skip_trivia(source: str, start: int) -> int:
    """Skip whitespace and comments, returning the next significant index."""
    i = start
    while i < len(source):
        ch = source[i]
        if ch in _WHITESPACE:
            i += 1
            continue
        if source.startswith("//", i):
            i += 2
            while i < len(source) and source[i] not in _LINE_BREAKS:
                i += 1
            continue
        if source.startswith("/*", i):
            close = source.find("*/", i + 2)
            if close < 0:
                raise ParseError("Unterminated block comment", i, len(source))
            i = close + 2
            continue
        break
    return i


def iter_tokens(source: str) -> Iterator[Token]:
    """Lazily yield tokens, ending with a single EOF token."""
    i = _skip_trivia(source, 0)

    while i < len(source):
        ch = source[i]

        if ch in _SINGLE_TOKENS:
            yield Token(_SINGLE_TOKENS[ch], ch, i, i + 1)
            i += 1

        elif ch in {'"', "'"}:
            value, end = _scan_string(source, i)
            yield Token("STRING", value, i, end)
            i = end

        elif ch in _DIGITS or ch in {"+", "-", "."}:
            end = _scan_number(source, i)
            yield Token("NUMBER", source[i:end], i, end)
            i = end

        elif is_ident_start(ch):
            start = i
            i = _scan_while(source, i + 1, _IDENT_CHARS)
            word = source[start:i]
            if word in _NUMERIC_WORDS:
                yield Token("NUMBER", word, start, i)
            elif word in _BAREWORDS:
                yield Token("BAREWORD", word, start, i)
            else:
                yield Token("IDENT", word, start, i)

        else:
            raise ParseError(f"Unexpected character {ch!r}", i, i + 1)

        i = _skip_trivia(source, i)

    yield Token("EOF", "", len(source), len(source))


def tokenize(source: str) -> list[Token]:
    return list(iter_tokens(source))
