"""Evaluate a postfix token sequence on a numeric stack."""
from typing import List

from infix_calculator.common.errors import EvalError
from infix_calculator.common.logger import logger
from infix_calculator.common.tokens import Token, TokenKind
from infix_calculator.engine.operators import OPERATORS, percent_of


def evaluate_rpn(postfix: List[Token]) -> float:
    """
    Reduce an RPN token sequence to a single value.

    Binary operators pop the right operand first, then the left one. The
    percent marker pops one value and pushes it divided by 100.

    :param List[Token] postfix: Tokens in RPN order

    :return: The single remaining value
    :rtype: float
    :raises EvalError: On missing operands or leftover values
    :raises DivisionByZeroError: If a divisor is zero
    """
    stack: List[float] = []

    for token in postfix:
        if token.kind is TokenKind.NUMBER:
            stack.append(token.value)

        elif token.kind is TokenKind.PERCENT:
            if not stack:
                raise EvalError("Invalid expression")
            stack.append(percent_of(stack.pop()))

        elif token.kind is TokenKind.OPERATOR:
            # Operator requires two operands
            if len(stack) < 2:
                raise EvalError("Invalid expression")
            b: float = stack.pop()
            a: float = stack.pop()
            stack.append(OPERATORS[token.symbol].apply(a, b))

        else:
            raise EvalError(f"Unsupported operator: {token.symbol}")

    if len(stack) != 1:
        raise EvalError("Invalid expression")

    logger.debug(f"🧮 Evaluated to {stack[0]!r}")
    return stack[0]
