"""Structured error types for parse, path and dispatch failures."""

from __future__ import annotations


class RelaxedJSONError(Exception):
    """Base class for structured relaxed-json errors."""


class ParseError(SyntaxError, RelaxedJSONError):
    """Malformed input text, raised by the tokenizer and the parser."""

    def __init__(
        self,
        message: str,
        start: int,
        end: int,
        expected: tuple[str, ...] = (),
        found: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.start = start
        self.end = end
        self.expected = expected
        self.found = found

    def __str__(self) -> str:
        expected_text = ""
        if self.expected:
            expected_text = f"; expected {', '.join(self.expected)}"
        found_text = ""
        if self.found is not None:
            found_text = f"; found {self.found}"
        return f"{self.message} at span [{self.start}, {self.end}){expected_text}{found_text}"


class PathError(ValueError, RelaxedJSONError):
    """Path expression text that does not match the path grammar."""

    def __init__(self, message: str, path: str, pos: int) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.pos = pos

    def __str__(self) -> str:
        return f"{self.message} at index {self.pos} of path {self.path!r}"


class ArityError(TypeError, RelaxedJSONError):
    """A catalog function was called with the wrong number of arguments."""


class UnknownFunctionError(LookupError, RelaxedJSONError):
    """No catalog function is registered under the requested name."""
