"""Entry point for Map Labeler.

This module provides the command-line entry point for the application.
"""

import sys


def main() -> int:
    """Main entry point for maplabeler command.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    from maplabeler.cli import cli_main

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
