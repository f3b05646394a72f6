from __future__ import annotations

from pathlib import Path

UNKNOWN_ORIGIN = "<unknown>"


def _describe_origin(origin: Path | None) -> str:
    return str(origin) if origin is not None else UNKNOWN_ORIGIN


class ParseError(Exception):
    """Base class for every error raised while parsing a nix.conf."""

    pass


class FileNotFound(ParseError, FileNotFoundError):
    """Raised when the file handed to `parse_file` does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"file '{path}' not found")


class FailedToReadFile(ParseError):
    """Raised when an existing path cannot be read as UTF-8 text."""

    def __init__(self, path: Path, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"failed to read contents of '{path}': {cause}")


class IncludedFileNotFound(ParseError):
    """Raised when a mandatory `include` names a file that cannot be parsed.

    The underlying reason is deliberately discarded: a missing file, an
    unreadable one and one with an illegal line all surface the same way.
    """

    def __init__(self, path: Path, origin: Path | None = None):
        self.path = path
        self.origin = origin
        super().__init__(
            f"file '{path}' included from '{_describe_origin(origin)}' not found"
        )


class IllegalConfiguration(ParseError):
    """Raised for a non-empty line that is neither an assignment nor an include."""

    def __init__(self, line: str, origin: Path | None = None):
        self.line = line
        self.origin = origin
        super().__init__(
            f"illegal configuration line '{line}' in '{_describe_origin(origin)}'"
        )


class IncludeCycle(ParseError):
    """Raised when an include directive re-enters a file that is still being parsed."""

    def __init__(self, path: Path, origin: Path | None = None):
        self.path = path
        self.origin = origin
        super().__init__(
            f"file '{path}' included from '{_describe_origin(origin)}' "
            "is already being parsed"
        )


__all__ = [
    "FailedToReadFile",
    "FileNotFound",
    "IllegalConfiguration",
    "IncludeCycle",
    "IncludedFileNotFound",
    "ParseError",
]
