"""Centralized configuration for Kalkulator Bulat.

This module defines:
- Input and evaluation limits (line length, exponent size)
- The operator priority table used by the notation converter
- Regex patterns for classifying input lines and operands
- REPL and logging defaults

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with BULAT_)
"""

import os
import re
import sys
from types import MappingProxyType

try:
    import importlib.metadata

    VERSION = importlib.metadata.version("kalkulator-bulat")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Input and evaluation limits
MAX_INPUT_LENGTH = int(os.getenv("BULAT_MAX_INPUT_LENGTH", "10000"))  # characters
MAX_EXPONENT = int(
    os.getenv("BULAT_MAX_EXPONENT", "100000")
)  # largest right operand accepted by ^
MAX_RESULT_BITS = int(
    os.getenv("BULAT_MAX_RESULT_BITS", "10000000")
)  # largest estimated size of a ^ result

# Integers cross between text and sympy.Integer at every step; Python 3.11+
# caps int/str conversion at 4300 digits unless told otherwise
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)

# REPL and logging
PROMPT = os.getenv("BULAT_PROMPT", "")
LOG_LEVEL = os.getenv("BULAT_LOG_LEVEL", "WARNING")

OPERATOR_PRIORITIES = MappingProxyType(
    {
        "+": 1,
        "-": 1,
        "*": 2,
        "/": 2,
        "^": 3,
    }
)
OPERATORS = frozenset(OPERATOR_PRIORITIES)
SIGN_OPERATORS = frozenset("+-")
PARENTHESES = frozenset("()")
TOKEN_DELIMITERS = frozenset(" ")

IDENTIFIER_RE = re.compile(r"^[A-Za-z]+$")
INTEGER_LITERAL_RE = re.compile(r"^[+-]?\d+$")
UNSIGNED_INTEGER_RE = re.compile(r"^\d+$")
# An operator, parenthesis or '=' followed by anything marks a non-query line
SPECIAL_SYMBOLS_RE = re.compile(r"[-+=()*/^].")
ASSIGNMENT_SPLIT_RE = re.compile(r"\s*=\s*")
