"""Postfix evaluation over arbitrary-precision integers."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import sympy as sp

from . import config
from .config import OPERATORS
from .logging_config import get_logger
from .types import CalcResult, ErrorKind
from .variables import VariableStore, is_identifier, is_literal

logger = get_logger("evaluator")


def _truncating_divide(left: sp.Integer, right: sp.Integer) -> sp.Integer:
    """Integer division rounding toward zero."""
    if right == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if bool(left < 0) == bool(right < 0) else -quotient


def _power(left: sp.Integer, right: sp.Integer) -> sp.Integer:
    if right < 0:
        raise ValueError(f"negative exponent {right}")
    if right > config.MAX_EXPONENT:
        raise ValueError(f"exponent {right} exceeds limit {config.MAX_EXPONENT}")
    # bit_length(left ** right) <= right * bit_length(left)
    estimated_bits = int(right) * int(left).bit_length()
    if estimated_bits > config.MAX_RESULT_BITS:
        raise ValueError(
            f"result of about {estimated_bits} bits exceeds limit {config.MAX_RESULT_BITS}"
        )
    return left**right


OPERATIONS: dict[str, Callable[[sp.Integer, sp.Integer], sp.Integer]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _truncating_divide,
    "^": _power,
}


def apply_operator(operator: str, left: sp.Integer, right: sp.Integer) -> sp.Integer:
    """Apply a binary operator to two integers.

    Raises:
        ZeroDivisionError: For division by zero
        ValueError: For a negative or oversized exponent, or an unknown operator
    """
    try:
        operation = OPERATIONS[operator]
    except KeyError:
        raise ValueError(f"Unsupported operator {operator!r}") from None
    return sp.Integer(operation(left, right))


def resolve_operand(operand: str, store: VariableStore) -> CalcResult:
    """Turn an operand token into an integer, following variables if needed."""
    if is_literal(operand):
        return CalcResult.success(sp.Integer(operand))
    if not is_identifier(operand):
        # e.g. "2+3" written without spaces
        logger.debug(f"Operand {operand!r} is neither a literal nor a name")
        return CalcResult.failure(ErrorKind.INVALID_EXPRESSION)
    return store.resolve(operand)


def evaluate_postfix(postfix: Sequence[str], store: VariableStore) -> CalcResult:
    """Evaluate postfix tokens with an operand stack.

    Args:
        postfix: Tokens in postfix order, typically from ``parser.to_postfix``
        store: Variable bindings used to resolve non-literal operands

    Returns:
        CalcResult holding the decimal string of the result. Resolution
        failures propagate as ``UNKNOWN_VARIABLE``; numeric faults and
        malformed postfix give ``INVALID_EXPRESSION``.
    """
    stack: list[str] = []
    for token in postfix:
        if token not in OPERATORS:
            stack.append(token)
            continue
        if len(stack) < 2:
            logger.debug(f"Operator {token!r} is missing an operand")
            return CalcResult.failure(ErrorKind.INVALID_EXPRESSION)

        # Right operand is on top
        right = resolve_operand(stack.pop(), store)
        if not right.ok:
            return right
        left = resolve_operand(stack.pop(), store)
        if not left.ok:
            return left

        try:
            value = apply_operator(token, left.value, right.value)
        except (ZeroDivisionError, ValueError) as e:
            logger.warning(f"Arithmetic error: {e}")
            return CalcResult.failure(ErrorKind.INVALID_EXPRESSION)
        stack.append(str(value))

    if len(stack) != 1:
        logger.debug(f"Postfix left {len(stack)} values on the stack")
        return CalcResult.failure(ErrorKind.INVALID_EXPRESSION)

    final = resolve_operand(stack[0], store)
    if not final.ok:
        return final
    return CalcResult.success(str(final.value))
