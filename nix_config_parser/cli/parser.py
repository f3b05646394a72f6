import argparse

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
OUTPUT_FORMATS = ["text", "json"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nix-config-parser",
        description="Parse a nix.conf and dump its settings to stderr",
    )
    parser.add_argument("file", help="Path to the nix.conf to parse")
    parser.add_argument(
        "-o",
        "--output",
        choices=OUTPUT_FORMATS,
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 when the file cannot be parsed",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Set the logging level (default: WARNING)",
    )
    return parser
