"""Rewrite a raw expression into the form the tokenizer expects."""
from typing import List

from infix_calculator.common.logger import logger
from infix_calculator.common.tokens import (
    BINARY_OPERATORS,
    DIGITS,
    LEFT_PAREN,
    PERCENT,
    RIGHT_PAREN,
)

# Characters after which a '-' is a sign rather than a subtraction
UNARY_MINUS_CONTEXT = BINARY_OPERATORS + PERCENT + LEFT_PAREN


def strip_whitespace(raw: str) -> str:
    """Remove every whitespace character."""
    return "".join(ch for ch in raw if not ch.isspace())


def insert_implicit_multiplication(expr: str) -> str:
    """
    Insert ``*`` where a multiplication is written by juxtaposition.

    Two independent scans are made:
        1. a digit or ``)`` followed by ``(``: ``2(3)`` -> ``2*(3)``
        2. ``)`` followed by a digit or ``(``: ``(2)3`` -> ``(2)*3``

    The first scan already separates ``)(``, so the second never doubles it.

    :param str expr: Expression without whitespace

    :return: Expression with explicit multiplications
    :rtype: str
    """
    first: List[str] = []
    for i, ch in enumerate(expr):
        first.append(ch)
        nxt = expr[i + 1] if i + 1 < len(expr) else ""
        if (ch in DIGITS or ch == RIGHT_PAREN) and nxt == LEFT_PAREN:
            first.append("*")

    scanned = "".join(first)
    second: List[str] = []
    for i, ch in enumerate(scanned):
        second.append(ch)
        nxt = scanned[i + 1] if i + 1 < len(scanned) else ""
        if ch == RIGHT_PAREN and nxt and (nxt in DIGITS or nxt == LEFT_PAREN):
            second.append("*")
    return "".join(second)


def rewrite_unary_minus(expr: str) -> str:
    """
    Turn every unary ``-`` into a subtraction from zero.

    A ``-`` is unary at the start of the expression or right after one of
    ``+ - * / ^ % (``. The pass does not overlap: a ``-`` that was just
    rewritten is not the prefix of the next one, so ``--5`` becomes
    ``0--5`` and ``3--5`` becomes ``3-0-5``. Chained signs are therefore not
    negated twice.

    :param str expr: Expression without whitespace

    :return: Expression with unary minus rewritten
    :rtype: str
    """
    out: List[str] = []
    last_rewritten = -2
    for i, ch in enumerate(expr):
        if ch == "-" and (
            i == 0 or (expr[i - 1] in UNARY_MINUS_CONTEXT and last_rewritten != i - 1)
        ):
            out.append("0-")
            last_rewritten = i
        else:
            out.append(ch)
    return "".join(out)


def normalize(raw: str) -> str:
    """
    Normalize a raw expression: strip whitespace, make multiplications
    explicit and rewrite unary minus.

    :param str raw: Expression as typed by the user

    :return: Normalized expression, possibly empty
    :rtype: str
    """
    expr = strip_whitespace(raw)
    if not expr:
        return expr
    expr = rewrite_unary_minus(insert_implicit_multiplication(expr))
    logger.debug(f"🧹 Normalized {raw!r} -> {expr!r}")
    return expr
