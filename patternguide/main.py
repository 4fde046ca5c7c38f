"""
Main entry point for the PatternGuide CLI.

This module provides the main() function that serves as the console script
entry point and returns a process exit code.
"""

import sys
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    from patternguide.cli_entry import main as cli_main

    try:
        cli_main(argv)
    except SystemExit as e:
        # argparse and the command handlers exit through sys.exit(...)
        code = e.code
        if code is None:
            return 0
        if isinstance(code, int):
            return code
        print(code, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
