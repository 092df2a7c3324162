"""Variable bindings and alias-chain resolution."""

from __future__ import annotations

import sympy as sp

from .config import IDENTIFIER_RE, INTEGER_LITERAL_RE
from .logging_config import get_logger
from .types import CalcResult, ErrorKind

logger = get_logger("variables")


def is_identifier(name: str) -> bool:
    """Return True if ``name`` is a valid variable name (letters only)."""
    return IDENTIFIER_RE.match(name) is not None


def is_literal(text: str) -> bool:
    """Return True if ``text`` is an optionally signed decimal integer literal."""
    return INTEGER_LITERAL_RE.match(text) is not None


class VariableStore:
    """Mapping from identifier to an integer literal or another identifier.

    A binding to another identifier is an alias: it is followed lazily at
    lookup time, so rebinding the target changes what the alias resolves to.
    One store is created per session and handed to the calculator.
    """

    def __init__(self) -> None:
        self._bindings: dict[str, str] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def assign(self, name: str, source: str) -> CalcResult:
        """Bind ``name`` to a literal or to an already known variable.

        Returns:
            Void success, or a failure with ``INVALID_IDENTIFIER`` for a bad
            name and ``INVALID_ASSIGNMENT`` for a bad source
        """
        if not is_identifier(name):
            return CalcResult.failure(ErrorKind.INVALID_IDENTIFIER)
        if is_literal(source):
            self._bindings[name] = str(sp.Integer(source))
        elif source in self._bindings:
            self._bindings[name] = source
        else:
            return CalcResult.failure(ErrorKind.INVALID_ASSIGNMENT)
        logger.debug(f"Assigned {name} = {self._bindings[name]}")
        return CalcResult.success()

    def resolve(self, name: str) -> CalcResult:
        """Follow the alias chain from ``name`` down to an integer.

        Returns:
            CalcResult holding a ``sympy.Integer``, or a failure with
            ``UNKNOWN_VARIABLE`` if a link is unbound or the chain loops
        """
        seen: set[str] = set()
        current = name
        while True:
            if current not in self._bindings:
                return CalcResult.failure(ErrorKind.UNKNOWN_VARIABLE)
            if current in seen:
                logger.warning(f"Alias cycle detected while resolving {name!r}")
                return CalcResult.failure(ErrorKind.UNKNOWN_VARIABLE)
            seen.add(current)
            bound = self._bindings[current]
            if is_literal(bound):
                return CalcResult.success(sp.Integer(bound))
            current = bound
