from __future__ import annotations
import logging
from typing import Optional

__all__ = ["extract_attribute"]

logger = logging.getLogger(__name__)


def extract_attribute(content: str, name: str) -> Optional[str]:
    """
    Reads the value of a double-quoted attribute from a tag's content.

    A quote preceded by a backslash does not end the value, so
    ``entity="say \\"hi\\""`` yields ``say \\"hi\\"``. Escapes are not
    decoded; the value is returned exactly as written.

    Args:
        content: The text after the tag name, e.g. ``translation="$num" entity="100"``.
        name: The attribute to look up.

    Returns:
        The attribute value, or None if the attribute is absent or its value
        has no closing quote. A missing closing quote is logged, never raised.
    """
    opener = name + '="'
    start = content.find(opener)
    if start == -1:
        return None
    start += len(opener)

    end = content.find('"', start)
    if end == -1:
        logger.warning("Malformed attribute %r in tag content: %s", name, content)
        return None

    while end > start and content[end - 1] == "\\":
        nxt = content.find('"', end + 1)
        if nxt == -1:
            break
        end = nxt
    return content[start:end]
