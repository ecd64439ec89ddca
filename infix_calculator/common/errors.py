"""Exceptions raised by the expression pipeline."""


class CalculationError(ValueError):
    """Base class for every failure of a single calculation."""


class InputError(CalculationError):
    """The equation is missing or is not a string."""


class LexError(CalculationError):
    """A character or number literal the tokenizer does not recognize."""


class ExpressionSyntaxError(CalculationError):
    """Parentheses do not balance."""


class EvalError(CalculationError):
    """The postfix sequence cannot be reduced to a single value."""


class DivisionByZeroError(EvalError):
    """Right operand of ``/`` is zero."""
