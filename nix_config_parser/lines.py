from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Self

from nix_config_parser.exceptions import IllegalConfiguration
from nix_config_parser.tokens import clean_line, tokenize

ASSIGN = "="


@dataclass(slots=True, frozen=True)
class Assignment:
    """A `name = value ...` line."""

    name: str
    value: str

    @classmethod
    def from_tokens(
        cls, tokens: list[str], line: str, origin: Path | None = None
    ) -> Self:
        if tokens[1] != ASSIGN:
            raise IllegalConfiguration(line, origin)
        return cls(name=tokens[0], value=" ".join(tokens[2:]))


@dataclass(slots=True, frozen=True)
class Include:
    """An `include <path>` or `!include <path>` line."""

    # keyword -> whether a failure to load the file is ignored
    keywords: ClassVar[dict[str, bool]] = {"include": False, "!include": True}
    path: Path
    optional: bool = False

    @property
    def keyword(self) -> str:
        return "!include" if self.optional else "include"

    @classmethod
    def from_tokens(
        cls, tokens: list[str], line: str, origin: Path | None = None
    ) -> Self:
        if len(tokens) != 2:
            raise IllegalConfiguration(line, origin)
        return cls(path=Path(tokens[1]), optional=cls.keywords[tokens[0]])


Directive = Assignment | Include


def interpret_tokens(
    tokens: list[str], line: str, origin: Path | None = None
) -> Directive | None:
    """Classify a tokenized line, validating its shape.

    *line* is only used to annotate `IllegalConfiguration`.
    """
    if not tokens:
        return None
    if len(tokens) < 2:
        raise IllegalConfiguration(line, origin)
    if tokens[0] in Include.keywords:
        return Include.from_tokens(tokens, line, origin)
    return Assignment.from_tokens(tokens, line, origin)


def interpret_line(line: str, origin: Path | None = None) -> Directive | None:
    """Turn one raw line of a nix.conf into a directive, or None if it is blank."""
    return interpret_tokens(tokenize(line), clean_line(line), origin)


__all__ = [
    "Assignment",
    "Directive",
    "Include",
    "interpret_line",
    "interpret_tokens",
]
