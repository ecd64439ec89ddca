"""Operator table: precedence, associativity and arithmetic of each symbol."""
import math
import operator
from typing import Callable, Dict, NamedTuple

from infix_calculator.common.errors import DivisionByZeroError
from infix_calculator.common.tokens import PERCENT


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]

LEFT = "left"
RIGHT = "right"


class OperatorSpec(NamedTuple):
    precedence: int
    associativity: str
    apply: OperatorFn


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def divide(a: float, b: float) -> float:
    """Divide ``a`` by ``b``, refusing a zero divisor."""
    if b == 0:
        raise DivisionByZeroError("Division by zero")
    return a / b


def power(a: float, b: float) -> float:
    """
    Raise ``a`` to the power ``b`` with IEEE semantics.

    ``math.pow`` raises where IEEE ``pow`` returns a special value, so those
    cases are mapped back:
        - overflow gives +inf, or -inf for a negative base and odd exponent
        - zero to a negative power gives +inf, or -inf for -0 and odd exponent
        - a negative base with a non-integer exponent gives NaN

    ``math.pow`` also returns 1 where IEEE-754 ``pow`` as JavaScript defines it
    gives NaN: a NaN exponent, or a base of 1 or -1 with an infinite exponent.

    :param float a: Base
    :param float b: Exponent

    :return: ``a ** b``
    :rtype: float
    """
    if math.isnan(b) or (abs(a) == 1 and math.isinf(b)):
        return math.nan
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and _is_odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        if a == 0 and b < 0:
            if _is_odd_integer(b):
                return math.copysign(math.inf, a)
            return math.inf
        return math.nan


# Mapping of binary operator symbols to (precedence, associativity, function)
OPERATORS: Dict[str, OperatorSpec] = {
    "+": OperatorSpec(1, LEFT, operator.add),
    "-": OperatorSpec(1, LEFT, operator.sub),
    "*": OperatorSpec(2, LEFT, operator.mul),
    "/": OperatorSpec(2, LEFT, divide),
    "^": OperatorSpec(4, RIGHT, power),
}

# Postfix percent only takes part in precedence comparisons
PERCENT_PRECEDENCE = 3


def precedence_of(symbol: str) -> int:
    """Return the precedence of an operator or percent symbol."""
    if symbol == PERCENT:
        return PERCENT_PRECEDENCE
    return OPERATORS[symbol].precedence


def percent_of(value: float) -> float:
    return value / 100
