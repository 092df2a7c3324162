"""Input tokenizing and infix-to-postfix conversion.

This module handles:
- Scanning a raw line into operand, operator and parenthesis tokens
- Collapsing runs of unary '+'/'-' into a single sign
- Converting the token stream to postfix order (shunting-yard)
- Detecting unbalanced parentheses
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

from .config import (
    OPERATOR_PRIORITIES,
    OPERATORS,
    PARENTHESES,
    SIGN_OPERATORS,
    TOKEN_DELIMITERS,
    UNSIGNED_INTEGER_RE,
)
from .logging_config import get_logger
from .types import CalcResult, ErrorKind, ExpressionError

logger = get_logger("parser")


def _cut_token(line: str, start: int) -> str:
    """Return the token beginning at ``start``.

    A token runs until the next delimiter or parenthesis. A parenthesis is
    always a token on its own.
    """
    end = start
    while (
        end < len(line)
        and line[end] not in TOKEN_DELIMITERS
        and line[end] not in PARENTHESES
    ):
        end += 1
    return line[start] if start == end else line[start:end]


def normalize_sign_run(token: str) -> str:
    """Collapse a leading run of '+'/'-' characters.

    A run starting with '+' becomes '+'. A run starting with '-' becomes '-'
    for an odd length and '+' for an even one. When the run prefixes an
    integer literal, the result is a single signed literal operand.

    Raises:
        ExpressionError: If the token starts with an operator but cannot be
            read as an operator, a sign run or a signed literal.
    """
    if len(token) <= 1 or token[0] not in OPERATORS:
        return token
    if token[0] not in SIGN_OPERATORS:
        raise ExpressionError(
            f"Malformed operator token: {token!r}", "MALFORMED_OPERATOR"
        )

    run_length = len(token) - len(token.lstrip("+-"))
    if token[0] == "+":
        sign = "+"
    else:
        sign = "-" if run_length % 2 else "+"

    remainder = token[run_length:]
    if not remainder:
        return sign
    if UNSIGNED_INTEGER_RE.match(remainder):
        return remainder if sign == "+" else f"-{remainder}"
    raise ExpressionError(
        f"Malformed signed operand: {token!r}", "MALFORMED_OPERAND"
    )


def _is_sign_run(token: str) -> bool:
    return all(char in SIGN_OPERATORS for char in token)


def iter_tokens(line: str) -> Iterator[str]:
    """Lazily yield normalized tokens from ``line`` in a single pass.

    Sign runs split by spaces (``5 - - 3``) are joined into one run
    before normalizing, so they read the same as ``5 -- 3``.
    """
    pointer = 0
    while pointer < len(line):
        if line[pointer] in TOKEN_DELIMITERS:
            pointer += 1
            continue
        token = _cut_token(line, pointer)
        pointer += len(token)
        if _is_sign_run(token):
            while True:
                lookahead = pointer
                while lookahead < len(line) and line[lookahead] in TOKEN_DELIMITERS:
                    lookahead += 1
                if lookahead >= len(line):
                    break
                following = _cut_token(line, lookahead)
                if not _is_sign_run(following):
                    break
                token += following
                pointer = lookahead + len(following)
        yield normalize_sign_run(token)


def _outranks(operator: str, top: str) -> bool:
    # Stack entries without a priority never yield to the current operator
    return OPERATOR_PRIORITIES[operator] > OPERATOR_PRIORITIES.get(top, sys.maxsize)


def to_postfix(tokens: Iterable[str]) -> CalcResult:
    """Convert infix tokens to postfix order using the shunting-yard algorithm.

    Args:
        tokens: Infix tokens, typically from :func:`iter_tokens`

    Returns:
        CalcResult whose value is the list of postfix tokens, or a failure
        with ``INVALID_EXPRESSION`` for malformed tokens and unbalanced
        parentheses
    """
    stack: list[str] = []
    output: list[str] = []
    try:
        for token in tokens:
            if token in OPERATORS:
                if not stack or stack[-1] == "(" or _outranks(token, stack[-1]):
                    stack.append(token)
                else:
                    # Pops every operator down to the nearest "(", whatever its
                    # priority: "1 + 2 * 3 * 4" is (1 + 2 * 3) * 4
                    while stack and (stack[-1] != "(" or _outranks(token, stack[-1])):
                        output.append(stack.pop())
                    stack.append(token)
            elif token == "(":
                stack.append(token)
            elif token == ")":
                while stack and stack[-1] != "(":
                    output.append(stack.pop())
                if not stack:
                    logger.debug("Unmatched closing parenthesis")
                    return CalcResult.failure(ErrorKind.INVALID_EXPRESSION)
                stack.pop()
            else:
                output.append(token)
    except ExpressionError as e:
        logger.debug(f"Tokenize error: {e.code} - {e.message}")
        return CalcResult.failure(ErrorKind.INVALID_EXPRESSION)

    while stack:
        top = stack.pop()
        if top in PARENTHESES:
            logger.debug("Unmatched opening parenthesis")
            return CalcResult.failure(ErrorKind.INVALID_EXPRESSION)
        output.append(top)

    logger.debug(f"Postfix: {' '.join(output)}")
    return CalcResult.success(output)


def parse(line: str) -> CalcResult:
    """Tokenize ``line`` and convert it to postfix in one step."""
    return to_postfix(iter_tokens(line))
