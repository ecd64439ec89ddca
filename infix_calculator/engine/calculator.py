"""Entry points running the whole expression pipeline."""
from typing import List, Optional

from infix_calculator.common.config import DisplaySettings
from infix_calculator.common.errors import CalculationError, InputError
from infix_calculator.common.logger import logger
from infix_calculator.common.operations import CalculationRequest, CalculationResult
from infix_calculator.common.tokens import Token
from infix_calculator.engine.evaluator import evaluate_rpn
from infix_calculator.engine.formatter import format_error, format_result
from infix_calculator.engine.normalizer import normalize
from infix_calculator.engine.parser import ExpressionParser
from infix_calculator.engine.tokenizer import tokenize


def calculate(equation: Optional[str]) -> float:
    """
    Evaluate an infix arithmetic expression.

    Steps:
        1. Normalize (whitespace, implicit ``*``, unary minus)
        2. Tokenize
        3. Convert to RPN
        4. Evaluate the RPN sequence

    An expression made only of whitespace evaluates to ``0``.

    :param str equation: Expression as typed

    :return: Result, possibly infinite or NaN
    :rtype: float
    :raises InputError: If ``equation`` is None or not a string
    :raises CalculationError: If the expression cannot be evaluated
    """
    if not isinstance(equation, str):
        raise InputError("Equation cannot be null or undefined")

    expr: str = normalize(equation)
    if not expr:
        return 0.0

    tokens: List[Token] = tokenize(expr)
    rpn: List[Token] = ExpressionParser.to_rpn(tokens)
    return evaluate_rpn(rpn)


def calculate_request(
    request: CalculationRequest, settings: Optional[DisplaySettings] = None
) -> CalculationResult:
    """
    Evaluate a request and wrap the outcome, success or failure, in a result.

    :param CalculationRequest request: Expression to evaluate
    :param DisplaySettings settings: Display configuration

    :return: Result carrying either the value or the error message
    :rtype: CalculationResult
    """
    try:
        value = calculate(request.expression)
    except CalculationError as exc:
        logger.info(f"❌ Could not evaluate {request.expression!r}: {exc}")
        return CalculationResult(
            expression=request.expression,
            display=format_error(exc, settings),
            error=str(exc),
        )

    return CalculationResult(
        expression=request.expression,
        result=value,
        display=format_result(value, settings),
    )
