from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Optional, Tuple

__all__ = ["OpenTagFrame", "ExtractedEntity", "AnnotatedLine"]

@dataclass(frozen=True)
class OpenTagFrame:
    """
    A tag that has been opened but whose closing tag has not been seen yet.

    Frames live on the parser's stack for the duration of a single
    `strip_and_extract` call and are discarded when the matching close tag
    pops them, or when parsing aborts.

    Attributes:
        name: The tag name, e.g. 'ne'. Never empty.
        start_word_position: Number of whitespace-delimited words already
            emitted into the clean line when the tag opened.
        raw_content: Everything after the tag name inside the opening tag,
            kept unparsed until the tag closes.
    """
    name: str
    start_word_position: int
    raw_content: str = ""

@dataclass(frozen=True)
class ExtractedEntity:
    """
    An entity value lifted out of an `<ne entity="...">word</ne>` span.

    Attributes:
        position: Zero-based word index in the clean line where the tag opened.
        value: The opaque attribute value, returned exactly as written.
    """
    position: int
    value: str

    @classmethod
    def get_field_names(cls) -> set[str]:
        """Returns the dataclass field names, used when loading sidecar files."""
        return {f.name for f in fields(cls)}

@dataclass(frozen=True)
class AnnotatedLine:
    """
    The per-line context that owns the entities extracted from one input line.

    One instance is created when a line is parsed and consumed once when the
    transformed output for that line is restored. Lines never share entity
    lists.

    Attributes:
        line_num: Zero-based index of the line in its input stream.
        original: The raw input line, markup included.
        clean: The line with markup removed. Equal to `original` when parsing
               failed and the passthrough policy was applied.
        entities: The extracted entities in source order.
        parsed: False when the markup could not be parsed.
        error: Name of the `MarkupError` subclass raised, if any.
    """
    line_num: int
    original: str
    clean: str
    entities: Tuple[ExtractedEntity, ...] = ()
    parsed: bool = True
    error: Optional[str] = None

    @property
    def values(self) -> list[str]:
        """The entity values in the order they should be re-inserted."""
        return [entity.value for entity in self.entities]

    @classmethod
    def get_field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}
