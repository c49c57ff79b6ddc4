"""Puts extracted entity values back into transformed text.

The transformation pipeline sees placeholder words such as ``$num`` in
place of the original entities. After it has run, every placeholder in its
output is replaced, left to right, by the next unused entity value:

    >>> substitute("the $num and $num", ["100", "200"])
    'the 100 and 200'

The mapping is monotonic and ignores each entity's recorded word position.
It is only correct when the pipeline keeps the number and relative order of
placeholders intact; placeholders left over once the values run out are
dropped from the output.
"""
from __future__ import annotations
from typing import Iterable, List

from .types import AnnotatedLine

__all__ = ["is_placeholder", "substitute", "restore_line"]


def is_placeholder(field: str, sentinel: str = "$") -> bool:
    """True for words like '$num': longer than two characters, sentinel, then a letter."""
    return len(field) > 2 and field[0] == sentinel and field[1].isalpha()


def substitute(transformed_line: str, entity_values: Iterable[str], sentinel: str = "$") -> str:
    """
    Replaces placeholder words in `transformed_line` with entity values.

    Args:
        transformed_line: Output of the external pipeline.
        entity_values: Values to insert, consumed in order.
        sentinel: First character of a placeholder word.

    Returns:
        The line with placeholders replaced, re-joined with single spaces.
    """
    pending = list(entity_values)
    cursor = 0
    out: List[str] = []
    for field in transformed_line.split():
        if is_placeholder(field, sentinel):
            if cursor >= len(pending):
                continue
            field = pending[cursor]
            cursor += 1
        if field:
            out.append(field)
    return " ".join(out)


def restore_line(transformed_line: str, annotated: AnnotatedLine, sentinel: str = "$") -> str:
    """Substitutes the entities owned by `annotated` into its transformed output."""
    return substitute(transformed_line, annotated.values, sentinel)
