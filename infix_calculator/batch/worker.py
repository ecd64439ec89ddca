"""Evaluation of a single batch line, run in-process or in a worker process."""
from typing import Optional, Tuple

from infix_calculator.common.config import DisplaySettings
from infix_calculator.common.logger import logger
from infix_calculator.common.operations import CalculationRequest, CalculationResult
from infix_calculator.engine.calculator import calculate_request


def evaluate_line(job: Tuple[int, str, Optional[DisplaySettings]]) -> CalculationResult:
    """
    Evaluate one expression of a batch.

    Takes a single tuple so it can be mapped over by a process pool.

    :param tuple job: ``(line_number, expression, settings)``

    :return: The calculation result, carrying the error message on failure
    :rtype: CalculationResult
    """
    line_number, expression, settings = job
    logger.debug(f"👷🏁 Evaluating line {line_number}: {expression}")

    result = calculate_request(CalculationRequest(expression=expression), settings)

    if result.succeeded:
        logger.debug(f"👷✅ Line {line_number}: {result.display}")
    else:
        logger.error(
            f"👷❌ Line {line_number} failed: {result.error}\n"
            f"Invalid arithmetic expression, could not evaluate: {expression!r}"
        )
    return result
