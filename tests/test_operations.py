"""Test classes CalculationRequest and CalculationResult."""
import math

from pydantic import ValidationError
import pytest

from infix_calculator.common.operations import CalculationRequest, CalculationResult


def test_calculation_request_valid() -> None:
    """Test that a valid CalculationRequest can be created."""
    req = CalculationRequest(expression="2 + 2 * 3")
    assert req.expression == "2 + 2 * 3"
    assert isinstance(req.expression, str)

def test_calculation_request_invalid_type() -> None:
    """Test that non-string expressions raise a validation error."""
    with pytest.raises(ValidationError):
        # int instead of str
        CalculationRequest(expression=123)

def test_calculation_result_valid() -> None:
    """Test that a successful CalculationResult can be created."""
    res = CalculationResult(expression="2 + 2 * 3", result=8.0, display="8")
    assert res.expression == "2 + 2 * 3"
    assert res.result == 8.0
    assert isinstance(res.result, float)
    assert res.succeeded

def test_calculation_result_error() -> None:
    """Test that a failed CalculationResult carries only the error."""
    res = CalculationResult(expression="5/0", display="Error: Division by zero", error="Division by zero")
    assert res.result is None
    assert not res.succeeded

def test_calculation_result_accepts_nan() -> None:
    """NaN and infinities are valid results."""
    assert math.isnan(CalculationResult(expression="x", result=math.nan, display="Error").result)
    assert CalculationResult(expression="x", result=math.inf, display="Infinity").result == math.inf

@pytest.mark.parametrize("kwargs", [
    {"result": 1.0, "error": "boom"},
    {},
])
def test_calculation_result_requires_result_xor_error(kwargs) -> None:
    """Test that exactly one of result and error must be set."""
    with pytest.raises(ValidationError):
        CalculationResult(expression="1", display="1", **kwargs)

def test_calculation_result_invalid_result_type() -> None:
    """Test that invalid result type raises a validation error."""
    with pytest.raises(ValidationError):
        CalculationResult(expression="2 + 2", result="not a float", display="?")

def test_calculation_result_is_frozen() -> None:
    """Test that results cannot be modified after creation."""
    res = CalculationResult(expression="1", result=1.0, display="1")
    with pytest.raises(ValidationError):
        res.display = "2"
