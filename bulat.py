#!/usr/bin/env python3
"""
Kalkulator Bulat - Integer Expression Calculator

Main entry point for the Kalkulator Bulat application.
This file serves as a thin wrapper that delegates all functionality
to the bulat_pkg package.

Usage:
    python bulat.py                      # Interactive REPL
    python bulat.py -e "2 + 3 * 4"       # Evaluate one line
    python bulat.py --help               # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for Kalkulator Bulat.

    Delegates all functionality to the bulat_pkg.cli module,
    which handles argument parsing, evaluation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    from bulat_pkg.cli import main_entry

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
