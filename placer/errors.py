"""Exceptions raised while parsing inline entity markup.

Every error is scoped to the single line being parsed. Callers decide whether
a failing line is passed through untouched or rejected; see
:func:`placer.parser.annotate`.
"""
from __future__ import annotations
from typing import Sequence

__all__ = [
    "MarkupError",
    "MalformedMarkup",
    "EmptyTagName",
    "UnsupportedUnaryTag",
    "UnmatchedClose",
    "MismatchedTagNames",
    "MultiWordEntitySpan",
    "UnclosedTag",
]


class MarkupError(ValueError):
    """Base class for all markup parsing failures."""

    def __init__(self, message: str, line: str = "") -> None:
        super().__init__(message)
        self.line = line


class MalformedMarkup(MarkupError):
    """An opening delimiter has no matching closing delimiter."""

    def __init__(self, line: str, partial: Sequence[str] = ()) -> None:
        super().__init__(f"Malformed markup, unterminated tag in: {line!r}", line)
        self.partial = list(partial)


class EmptyTagName(MarkupError):
    def __init__(self, line: str) -> None:
        super().__init__(f"Empty tag name in: {line!r}", line)


class UnsupportedUnaryTag(MarkupError):
    """Self-closing tags such as `<wall/>` are rejected."""

    def __init__(self, tag: str, line: str) -> None:
        super().__init__(f"Unary tags are not supported ({tag!r}) in: {line!r}", line)
        self.tag = tag


class UnmatchedClose(MarkupError):
    def __init__(self, name: str, line: str) -> None:
        super().__init__(f"Closing tag '{name}' has no open tag in: {line!r}", line)
        self.name = name


class MismatchedTagNames(MarkupError):
    """A closing tag does not match the most recently opened tag."""

    def __init__(self, expected: str, found: str, line: str) -> None:
        super().__init__(
            f"Expected closing tag '{expected}' but found '{found}' in: {line!r}", line
        )
        self.expected = expected
        self.found = found


class MultiWordEntitySpan(MarkupError):
    """An entity tag must wrap exactly one word."""

    def __init__(self, start: int, end: int, line: str) -> None:
        super().__init__(
            f"Entity tag spans words {start}..{end}, expected exactly one word in: {line!r}",
            line,
        )
        self.start = start
        self.end = end


class UnclosedTag(MarkupError):
    def __init__(self, open_tags: Sequence[str], line: str) -> None:
        names = ", ".join(open_tags)
        super().__init__(f"Unclosed tag(s) {names} at end of: {line!r}", line)
        self.open_tags = list(open_tags)
