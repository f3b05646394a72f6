from __future__ import annotations

import re

COMMENT_CHAR = "#"
WHITESPACE = " \t\r\n"

_SEPARATOR_RE = re.compile(r"[ \t\r\n]+")


def strip_comment(line: str) -> str:
    """Drop everything from the first `#` onwards; nix.conf has no escape for it."""
    position = line.find(COMMENT_CHAR)
    if position == -1:
        return line
    return line[:position]


def clean_line(line: str) -> str:
    """Return the comment-free, trimmed text of a line."""
    return strip_comment(line).strip(WHITESPACE)


def tokenize(line: str) -> list[str]:
    """Split one logical line into its non-empty whitespace-separated tokens.

    >>> tokenize("substituters   =  https://a  https://b # mirrors")
    ['substituters', '=', 'https://a', 'https://b']
    """
    cleaned = clean_line(line)
    if not cleaned:
        return []
    return [token for token in _SEPARATOR_RE.split(cleaned) if token]


__all__ = ["clean_line", "strip_comment", "tokenize"]
