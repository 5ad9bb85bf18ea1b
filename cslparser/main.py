#!/usr/bin/env python3
"""Main entry point for the cslparser command-line tool."""

import sys
from cslparser.commands import main


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
