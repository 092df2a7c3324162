"""Main entry point for running bulat_pkg as a module.

This allows running Kalkulator Bulat with:
    python -m bulat_pkg
    python -m bulat_pkg -e "2 + 2"

This is equivalent to running:
    python -m bulat_pkg.cli
    python bulat.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
