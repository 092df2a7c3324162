"""Expression engine: classifies one input line and dispatches it.

A line is one of:
- a variable query (``a``), answered from the variable store
- an assignment (``a = 5`` or ``b = a``)
- an expression (``(a + 2) * -3``), run through tokenizer, converter and
  evaluator

Every outcome is returned as a :class:`~bulat_pkg.types.CalcResult`; nothing
is raised to the caller.
"""

from __future__ import annotations

from . import config
from .config import ASSIGNMENT_SPLIT_RE, SPECIAL_SYMBOLS_RE
from .evaluator import evaluate_postfix
from .logging_config import get_logger
from .parser import parse
from .types import CalcResult, ErrorKind
from .variables import VariableStore, is_identifier, is_literal

logger = get_logger("engine")


class Calculator:
    """Evaluate input lines against a single variable store."""

    def __init__(self, store: VariableStore | None = None) -> None:
        self.store = store if store is not None else VariableStore()

    def calculate(self, line: str) -> CalcResult:
        line = line.strip()
        if len(line) > config.MAX_INPUT_LENGTH:
            logger.warning(
                f"Input too long ({len(line)} > {config.MAX_INPUT_LENGTH} characters)"
            )
            return CalcResult.failure(ErrorKind.INVALID_EXPRESSION)

        if not SPECIAL_SYMBOLS_RE.search(line):
            handler, fallback = self.query, ErrorKind.INVALID_EXPRESSION
        elif "=" in line:
            handler, fallback = self.assign, ErrorKind.INVALID_ASSIGNMENT
        else:
            handler, fallback = self.evaluate, ErrorKind.INVALID_EXPRESSION
        try:
            return handler(line)
        except Exception:
            logger.exception(f"Unexpected error handling {line!r}")
            return CalcResult.failure(fallback)

    def query(self, line: str) -> CalcResult:
        """Answer a line without operators: a literal or a variable name."""
        if is_literal(line):
            return CalcResult.success(line)
        if not is_identifier(line):
            return CalcResult.failure(ErrorKind.INVALID_IDENTIFIER)
        resolved = self.store.resolve(line)
        if not resolved.ok:
            return resolved
        return CalcResult.success(str(resolved.value))

    def assign(self, line: str) -> CalcResult:
        """Handle ``name = source``."""
        parts = ASSIGNMENT_SPLIT_RE.split(line)
        if len(parts) != 2:
            return CalcResult.failure(ErrorKind.INVALID_ASSIGNMENT)
        name, source = parts
        if not is_identifier(name):
            return CalcResult.failure(ErrorKind.INVALID_IDENTIFIER)
        return self.store.assign(name, source)

    def evaluate(self, line: str) -> CalcResult:
        """Run an arithmetic expression through the postfix pipeline."""
        try:
            postfix = parse(line)
            if not postfix.ok:
                return postfix
            result = evaluate_postfix(postfix.value, self.store)
        except Exception:
            logger.exception(f"Unexpected error evaluating {line!r}")
            return CalcResult.failure(ErrorKind.INVALID_EXPRESSION)

        if not result.ok and result.error is not ErrorKind.UNKNOWN_VARIABLE:
            return CalcResult.failure(ErrorKind.INVALID_EXPRESSION)
        return result
