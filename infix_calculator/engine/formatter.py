"""Render evaluation outcomes as display strings."""
from decimal import ROUND_HALF_UP, Decimal, localcontext
import math
from typing import Optional

from infix_calculator.common.config import DEFAULT_SETTINGS, DisplaySettings

# Enough digits to hold any double exactly, plus the fractional digits kept
_DECIMAL_PRECISION = 1000


def _round_half_up(exact: Decimal, exponent: int) -> Decimal:
    """Round ``exact`` to a multiple of ``10 ** exponent``, ties away from zero."""
    return exact.quantize(Decimal(1).scaleb(exponent), rounding=ROUND_HALF_UP)


def _exponential(value: float, precision: int) -> str:
    """
    Render ``value`` as ``d.ddd…e±x`` with ``precision`` fractional digits.

    The exponent carries no zero padding (``1.5e+5``).
    """
    exact = Decimal(value)
    exponent = exact.adjusted()
    rounded = _round_half_up(exact, exponent - precision)
    if rounded.adjusted() != exponent:
        # Rounding carried into a new digit: 9.99…e10 -> 1.00…e11
        exponent = rounded.adjusted()
        rounded = _round_half_up(rounded, exponent - precision)
    significand = rounded.scaleb(-exponent)
    return f"{significand:f}e{exponent:+d}"


def _positional(value: float, precision: int) -> str:
    text = f"{_round_half_up(Decimal(value), -precision):f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    # Rounding can leave a negative zero behind
    if text == "-0":
        text = "0"
    return text


def format_result(value: float, settings: Optional[DisplaySettings] = None) -> str:
    """
    Format a numeric result for display.

    - NaN is shown as ``Error``, infinities as ``Infinity`` / ``-Infinity``
    - very large or very small non-zero magnitudes use exponential notation
    - everything else is rounded to ``precision`` decimals with trailing zeros removed

    Rounding works on the exact binary value and resolves ties away from zero.

    :param float value: Evaluation result
    :param DisplaySettings settings: Display configuration, defaults apply when omitted

    :return: Display string
    :rtype: str
    """
    settings = settings or DEFAULT_SETTINGS

    if math.isnan(value):
        return "Error"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    magnitude = abs(value)
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        if magnitude >= settings.exponent_upper or (value != 0 and magnitude < settings.exponent_lower):
            return _exponential(value, settings.precision)
        return _positional(value, settings.precision)


def format_error(exc: Exception, settings: Optional[DisplaySettings] = None) -> str:
    """Prefix an error message for display."""
    settings = settings or DEFAULT_SETTINGS
    return f"{settings.error_prefix}{exc}"
