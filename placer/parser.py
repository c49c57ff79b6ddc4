"""Strips inline entity markup from a line and collects the entity values.

Input lines carry named entities as single-word markup spans::

    the price is <ne translation="$num" entity="100">$num</ne> dollars

`strip_and_extract` removes every tag, returning the clean line
``the price is $num dollars`` together with ``[ExtractedEntity(3, '100')]``.
The clean line goes through the external transformation pipeline; the
entity values are later put back by :mod:`placer.substitute`.

Tags must nest properly. Any structural problem aborts the parse of that
line with a :class:`~placer.errors.MarkupError`; :func:`annotate` applies the
configured policy for such lines.
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from .attributes import extract_attribute
from .config import Config
from .errors import (
    EmptyTagName,
    MarkupError,
    MismatchedTagNames,
    MultiWordEntitySpan,
    UnclosedTag,
    UnmatchedClose,
    UnsupportedUnaryTag,
)
from .tokenizer import is_tag, tokenize, trim_tag
from .types import AnnotatedLine, ExtractedEntity, OpenTagFrame

__all__ = ["strip_and_extract", "annotate"]

logger = logging.getLogger(__name__)

LBRACK = "<"
RBRACK = ">"
_TAG_PADDING = " \t\n"
_WHITESPACE = re.compile(r"\s")


def _split_tag(tag: str) -> Tuple[str, str]:
    """Split the tag interior at the first whitespace into name and content."""
    m = _WHITESPACE.search(tag)
    if m is None:
        return tag, ""
    return tag[:m.start()], tag[m.end():]


def strip_and_extract(
    line: str,
    entity_tag: str = "ne",
    entity_attribute: str = "entity",
) -> Tuple[str, List[ExtractedEntity]]:
    """
    Removes all markup from `line` and extracts the entity tag values.

    The parser walks the token sequence with a stack of open tags. Text
    tokens are appended to the clean line, separated by a single space when
    tag removal would otherwise glue two words together. The word position
    is the number of whitespace-delimited words emitted so far; an entity
    tag must open at word ``n`` and close at word ``n + 1``.

    Args:
        line: The raw input line.
        entity_tag: Name of the tag that carries an entity.
        entity_attribute: Attribute of `entity_tag` holding the value.

    Returns:
        A tuple `(clean_line, entities)`. Entities are in source order. A
        missing or malformed attribute yields an empty value.

    Raises:
        MarkupError: One of its subclasses, describing why the line's markup
            is not well formed.
    """
    if LBRACK not in line:
        return line, []

    tokens = tokenize(line, LBRACK, RBRACK)

    stack: List[OpenTagFrame] = []
    entities: List[ExtractedEntity] = []
    clean = ""
    word_pos = 0

    for token in tokens:
        if not is_tag(token, LBRACK):
            if clean and not clean[-1].isspace() and not token[0].isspace():
                clean += " "
            clean += token
            word_pos = len(clean.split())
            continue

        tag = trim_tag(token, LBRACK, RBRACK).strip(_TAG_PADDING)
        if not tag:
            raise EmptyTagName(line)
        if tag.endswith("/"):
            raise UnsupportedUnaryTag(token, line)

        is_close = tag.startswith("/")
        if is_close:
            tag = tag[1:]
        name, content = _split_tag(tag)

        if not is_close:
            stack.append(OpenTagFrame(name, word_pos, content))
            continue

        if not stack:
            raise UnmatchedClose(name, line)
        frame = stack.pop()
        if frame.name != name:
            raise MismatchedTagNames(frame.name, name, line)

        if name == entity_tag:
            if frame.start_word_position != word_pos - 1:
                raise MultiWordEntitySpan(frame.start_word_position, word_pos, line)
            value = extract_attribute(frame.raw_content, entity_attribute)
            entities.append(ExtractedEntity(frame.start_word_position, value or ""))

    if stack:
        raise UnclosedTag([frame.name for frame in stack], line)

    return clean, entities


def annotate(line: str, line_num: int = 0, cfg: Optional[Config] = None) -> AnnotatedLine:
    """
    Parses one line and wraps the result in its own `AnnotatedLine`.

    With the default 'passthrough' policy a line whose markup cannot be
    parsed is kept verbatim and carries no entities. With 'reject' the
    `MarkupError` propagates to the caller.
    """
    cfg = cfg or Config()
    try:
        clean, entities = strip_and_extract(line, cfg.entity_tag, cfg.entity_attribute)
    except MarkupError as e:
        if cfg.on_error == "reject":
            raise
        logger.debug("Line %d left unstripped: %s", line_num, e)
        return AnnotatedLine(
            line_num=line_num,
            original=line,
            clean=line,
            parsed=False,
            error=type(e).__name__,
        )
    return AnnotatedLine(
        line_num=line_num,
        original=line,
        clean=clean,
        entities=tuple(entities),
    )
