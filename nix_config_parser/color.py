from __future__ import annotations

import os
from typing import TextIO

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexer import Lexer
from pygments.lexers import IniLexer, JsonLexer

LEXERS: dict[str, type[Lexer]] = {
    "text": IniLexer,
    "json": JsonLexer,
}


def colorize(text: str, output_format: str, stream: TextIO) -> str:
    """Highlight CLI output when it is headed for a terminal."""
    if (
        (not text)
        or (os.getenv("NO_COLOR") == "1")
        or (not stream.isatty())
        or output_format not in LEXERS
    ):
        return text
    return highlight(text, LEXERS[output_format](), TerminalFormatter()).rstrip("\n")


__all__ = ["colorize"]
