import sys

from nix_config_parser.cli import main

if __name__ == "__main__":
    sys.exit(main())
