"""
Command line driver that parses a single nix.conf and reports the result.
"""

import logging
import sys

from nix_config_parser.cli.parser import build_parser
from nix_config_parser.color import colorize
from nix_config_parser.exceptions import ParseError
from nix_config_parser.parser import parse_file

logger = logging.getLogger(__name__)


def configure_logging(log_level: str, verbose: bool) -> None:
    logging_level = getattr(logging, log_level)
    if verbose and logging_level > logging.DEBUG:
        logging_level = logging.DEBUG
    logging.basicConfig(level=logging_level, format="%(levelname)s: %(message)s")


def main(args=None) -> int:
    """Dump the parsed settings or the parse error, both to stderr.

    The exit status is 0 either way unless `--check` is given.
    """
    parser = build_parser()
    args = parser.parse_args(args)
    configure_logging(args.log_level, args.verbose)

    logger.debug(f"Starting to process: {args.file}")
    try:
        config = parse_file(args.file)
    except ParseError as exc:
        print(exc, file=sys.stderr)
        return 1 if args.check else 0

    match args.output:
        case "json":
            rendered = config.to_json()
        case _:
            rendered = config.dump()
    if rendered:
        print(colorize(rendered, args.output, sys.stderr), file=sys.stderr)
    else:
        logger.info(f"No settings found in {args.file}")
    return 0
