"""CLI package for the nix-config-parser entrypoint."""

from nix_config_parser.cli.main import main
from nix_config_parser.cli.parser import build_parser

__all__ = ["build_parser", "main"]
