"""Splits a raw line into plain-text runs and markup tags.

Example::

    >>> tokenize('this <b> is a </b> test .')
    ['this ', '<b>', ' is a ', '</b>', ' test .']

Tokens are raw substrings of the input: joining them gives the line back.
Whether a token is a tag is decided separately by :func:`is_tag`, so a run
like ``'<3>'`` is still split out by the tokenizer but treated as text by the
parser.
"""
from __future__ import annotations
from typing import List

from .errors import MalformedMarkup

__all__ = ["tokenize", "is_tag", "trim_tag"]


def tokenize(line: str, lbrack: str = "<", rbrack: str = ">") -> List[str]:
    """
    Splits `line` into an ordered list of text and tag tokens.

    Args:
        line: The input line.
        lbrack: Opening delimiter of a tag.
        rbrack: Closing delimiter of a tag.

    Returns:
        The tokens in source order.

    Raises:
        MalformedMarkup: If an opening delimiter has no closing delimiter
            after it. The tokens collected before the failure are available
            on the exception's `partial` attribute.
    """
    tokens: List[str] = []
    cpos = 0
    while cpos != len(line):
        lpos = line.find(lbrack, cpos)
        if lpos == -1:
            tokens.append(line[cpos:])
            break

        rpos = line.find(rbrack, lpos + len(lbrack) - 1)
        if rpos == -1:
            raise MalformedMarkup(line, tokens)

        if lpos > cpos:
            tokens.append(line[cpos:lpos])
        tokens.append(line[lpos:rpos + len(rbrack)])
        cpos = rpos + len(rbrack)
    return tokens


def is_tag(token: str, lbrack: str = "<") -> bool:
    """True if `token` opens with `lbrack` followed by '/' or an ASCII letter."""
    if not token.startswith(lbrack) or len(token) <= len(lbrack):
        return False
    c = token[len(lbrack)]
    return c == "/" or ("a" <= c <= "z") or ("A" <= c <= "Z")


def trim_tag(token: str, lbrack: str = "<", rbrack: str = ">") -> str:
    """
    Removes the delimiters around a tag token.

    Tokens too short to hold both delimiters, or not wrapped in them, are
    returned unchanged.
    """
    if len(token) < len(lbrack) + len(rbrack):
        return token
    if token.startswith(lbrack) and token.endswith(rbrack):
        return token[len(lbrack):len(token) - len(rbrack)]
    return token
