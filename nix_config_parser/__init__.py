"""
nix-config-parser

A Python library for parsing the `nix.conf` configuration files read by the
Nix package manager into an ordered mapping of setting names to values.
"""

from nix_config_parser.config import NixConfig
from nix_config_parser.exceptions import (
    FailedToReadFile,
    FileNotFound,
    IllegalConfiguration,
    IncludeCycle,
    IncludedFileNotFound,
    ParseError,
)
from nix_config_parser.parser import parse_file, parse_string

__all__ = [
    "FailedToReadFile",
    "FileNotFound",
    "IllegalConfiguration",
    "IncludeCycle",
    "IncludedFileNotFound",
    "NixConfig",
    "ParseError",
    "parse_file",
    "parse_string",
]
