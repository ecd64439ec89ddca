"""Token model shared by the tokenizer, the converter and the evaluator."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


DIGITS = "0123456789"
DECIMAL_POINT = "."
BINARY_OPERATORS = "+-*/^"
PERCENT = "%"
LEFT_PAREN = "("
RIGHT_PAREN = ")"


class TokenKind(str, Enum):
    """Kind tag carried by every token."""

    NUMBER = "number"
    OPERATOR = "operator"
    PERCENT = "percent"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class Token(BaseModel):
    """
    A single lexical unit of a normalized expression.

    ``symbol`` keeps the source text of the token; ``value`` is only set for
    numbers.
    """

    model_config = ConfigDict(frozen=True)

    kind: TokenKind = Field(..., description="Kind of token")
    symbol: str = Field(..., min_length=1, description="Source text of the token")
    value: Optional[float] = Field(default=None, description="Numeric value of a number token")

    @model_validator(mode="after")
    def value_matches_kind(self) -> "Token":
        """Ensure only number tokens carry a value."""
        if (self.kind is TokenKind.NUMBER) != (self.value is not None):
            raise ValueError(f"Token of kind {self.kind.value} has invalid value {self.value!r}")
        return self

    @classmethod
    def number(cls, text: str) -> "Token":
        return cls(kind=TokenKind.NUMBER, symbol=text, value=float(text))

    @classmethod
    def operator(cls, symbol: str) -> "Token":
        return cls(kind=TokenKind.OPERATOR, symbol=symbol)

    @classmethod
    def percent(cls) -> "Token":
        return cls(kind=TokenKind.PERCENT, symbol=PERCENT)

    @classmethod
    def left_paren(cls) -> "Token":
        return cls(kind=TokenKind.LEFT_PAREN, symbol=LEFT_PAREN)

    @classmethod
    def right_paren(cls) -> "Token":
        return cls(kind=TokenKind.RIGHT_PAREN, symbol=RIGHT_PAREN)

    @property
    def is_paren(self) -> bool:
        return self.kind in (TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN)

    def __str__(self) -> str:
        return self.symbol
