"""Display configuration for formatted results."""
from pydantic import BaseModel, ConfigDict, Field, model_validator


class DisplaySettings(BaseModel):
    """
    Controls how numeric results are rendered for display.

    Values whose magnitude is at least ``exponent_upper``, or non-zero and
    below ``exponent_lower``, are shown in exponential notation.
    """

    model_config = ConfigDict(frozen=True)

    precision: int = Field(default=10, ge=0, le=20, description="Fractional digits kept in results")
    exponent_upper: float = Field(default=1e10, gt=0, description="Smallest magnitude shown as exponential")
    exponent_lower: float = Field(default=1e-10, gt=0, description="Magnitudes below this are shown as exponential")
    error_prefix: str = Field(default="Error: ", description="Prefix put before error messages")

    @model_validator(mode="after")
    def bounds_are_ordered(self) -> "DisplaySettings":
        """Ensure the exponential thresholds leave a positional range."""
        if self.exponent_lower >= self.exponent_upper:
            raise ValueError("exponent_lower must be smaller than exponent_upper")
        return self


DEFAULT_SETTINGS = DisplaySettings()
