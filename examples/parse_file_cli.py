#!/usr/bin/env python3
"""
Parse the nix.conf given as the first argument and print what was found.

Both the settings and any parse error go to stderr; the exit status is
always 0.
"""

import sys

from nix_config_parser import ParseError, parse_file


def main() -> int:
    if len(sys.argv) < 2:
        print("expected a file as an argument", file=sys.stderr)
        return 2
    try:
        settings = parse_file(sys.argv[1])
    except ParseError as exc:
        print(exc, file=sys.stderr)
    else:
        print(settings, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
