"""Pydantic models for calculation requests and results."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CalculationRequest(BaseModel):
    """Represents a single expression submitted for evaluation."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Infix arithmetic expression as typed")


class CalculationResult(BaseModel):
    """Represents the outcome of an evaluated expression."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original arithmetic expression")
    result: Optional[float] = Field(default=None, description="Numeric result, unset on failure")
    display: str = Field(..., description="Result formatted for display")
    error: Optional[str] = Field(default=None, description="Error message, unset on success")

    @model_validator(mode="after")
    def result_xor_error(self) -> "CalculationResult":
        """Ensure exactly one of result and error is set."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of 'result' and 'error' must be set")
        return self

    @property
    def succeeded(self) -> bool:
        return self.error is None
