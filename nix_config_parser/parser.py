from __future__ import annotations

import logging
import os
from pathlib import Path

from nix_config_parser.config import NixConfig
from nix_config_parser.exceptions import (
    FailedToReadFile,
    FileNotFound,
    IncludeCycle,
    IncludedFileNotFound,
    ParseError,
)
from nix_config_parser.lines import Assignment, Include, interpret_line

logger = logging.getLogger(__name__)

StrPath = str | os.PathLike[str]

# Raised by the OS for unusable paths: symlink loops (RuntimeError before
# Python 3.13), embedded NUL bytes (ValueError), over-long names (OSError).
PATH_ERRORS = (OSError, RuntimeError, ValueError)


def read_config_text(path: Path) -> str:
    """Read a whole nix.conf, mapping every failure onto the parse error taxonomy."""
    try:
        exists = path.exists()
    except PATH_ERRORS as exc:
        raise FailedToReadFile(path, exc) from exc
    if not exists:
        raise FileNotFound(path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        raise FailedToReadFile(path, exc) from exc


def canonical_path(path: Path) -> Path | None:
    """Resolve *path* for include cycle checks, or None if it cannot be resolved."""
    try:
        return path.resolve()
    except PATH_ERRORS:
        return None


def parse_file(path: StrPath) -> NixConfig:
    """Parse the nix.conf at *path*.

    Relative paths, including those named by `include` directives, are
    resolved against the current working directory.
    """
    return _parse_file(Path(path), including=())


def parse_string(text: str | bytes, origin: StrPath | None = None) -> NixConfig:
    """Parse nix.conf contents held in memory.

    *origin* only annotates error messages and defaults to `<unknown>`.
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    return _parse_string(
        text, origin=Path(origin) if origin is not None else None, including=()
    )


def _parse_file(path: Path, including: tuple[Path, ...]) -> NixConfig:
    logger.debug(f"Reading {path}")
    contents = read_config_text(path)
    canonical = canonical_path(path)
    if canonical is not None:
        including = including + (canonical,)
    return _parse_string(contents, origin=path, including=including)


def _parse_string(
    text: str, origin: Path | None, including: tuple[Path, ...]
) -> NixConfig:
    config = NixConfig()
    # Only "\n" separates lines; a trailing "\r" is trimmed by the tokenizer.
    for line in text.split("\n"):
        match interpret_line(line, origin):
            case None:
                continue
            case Assignment(name=name, value=value):
                config.set(name, value)
            case Include() as include:
                included = _resolve_include(include, origin, including)
                if included is not None:
                    config.update(included)
    logger.debug(f"Parsed {len(config)} settings from {origin or '<string>'}")
    return config


def _resolve_include(
    include: Include, origin: Path | None, including: tuple[Path, ...]
) -> NixConfig | None:
    """Parse an included file, or return None when an optional include fails."""
    canonical = canonical_path(include.path)
    if canonical is not None and canonical in including:
        raise IncludeCycle(include.path, origin)
    try:
        included = _parse_file(include.path, including)
    except IncludeCycle:
        raise
    except (ParseError, *PATH_ERRORS) as exc:
        if include.optional:
            logger.debug(f"Skipping {include.keyword} {include.path}: {exc}")
            return None
        raise IncludedFileNotFound(include.path, origin) from None
    logger.debug(
        f"Included {len(included)} settings from {include.path} into "
        f"{origin or '<string>'}"
    )
    return included


__all__ = ["parse_file", "parse_string", "read_config_text"]
