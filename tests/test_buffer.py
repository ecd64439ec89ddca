"""Test class EditBuffer."""
import pytest

from infix_calculator.common.config import DisplaySettings
from infix_calculator.keypad.buffer import EditBuffer


def type_in(buffer: EditBuffer, text: str) -> None:
    for ch in text:
        buffer.press(ch)


def test_press_and_evaluate() -> None:
    """Typed characters build the expression; '=' shows the result without editing it."""
    buffer = EditBuffer()
    type_in(buffer, "1+2*3")
    buffer.press("=")
    assert buffer.expression == "1+2*3"
    assert buffer.result == "7"


def test_evaluate_error_is_displayed() -> None:
    """Failures are shown as 'Error: <message>'."""
    buffer = EditBuffer(expression="5/0")
    assert buffer.evaluate() == "Error: Division by zero"
    assert buffer.result == "Error: Division by zero"


def test_evaluate_blank_keeps_result() -> None:
    """Evaluating a blank expression does nothing."""
    buffer = EditBuffer(expression="  ", result="42")
    buffer.evaluate()
    assert buffer.result == "42"


def test_clear() -> None:
    """'C' empties both the expression and the result."""
    buffer = EditBuffer(expression="1+1", result="2")
    buffer.press("C")
    assert buffer.expression == ""
    assert buffer.result == ""


@pytest.mark.parametrize("expr,expected", [
    ("12+345", "12+"),
    ("12+3.5", "12+"),
    ("(1+2)", "(1+2)"),
    ("", ""),
])
def test_clear_entry(expr: str, expected: str) -> None:
    """'CE' removes only the trailing number."""
    buffer = EditBuffer(expression=expr)
    buffer.press("CE")
    assert buffer.expression == expected


@pytest.mark.parametrize("expr,expected", [
    ("12", "1"),
    ("1", ""),
    ("", ""),
])
def test_backspace(expr: str, expected: str) -> None:
    """Backspace removes the last character."""
    buffer = EditBuffer(expression=expr)
    buffer.press("backspace")
    assert buffer.expression == expected


@pytest.mark.parametrize("expr,expected", [
    ("5", "-5"),
    ("-5", "5"),
    ("2.5", "-2.5"),
    ("3+5", "3+-5"),
    ("3+-5", "3+5"),
    ("(2", "(-2"),
    ("(-2", "(2"),
    ("3-5", "3--5"),
    ("3+", "3+"),
    ("(1+2)", "(1+2)"),
    ("", ""),
])
def test_toggle_sign(expr: str, expected: str) -> None:
    """The trailing number gains or loses its sign; a subtraction is left alone."""
    buffer = EditBuffer(expression=expr)
    buffer.press("toggle-sign")
    assert buffer.expression == expected


def test_toggle_sign_then_evaluate() -> None:
    """A toggled sign after '+' evaluates as a negative operand."""
    buffer = EditBuffer(expression="3+5")
    buffer.toggle_sign()
    assert buffer.evaluate() == "-2"


@pytest.mark.parametrize("key,handled", [
    ("7", True),
    ("^", True),
    ("%", True),
    ("a", False),
    ("Shift", False),
])
def test_press_key_input(key: str, handled: bool) -> None:
    """Only calculator characters are appended from the keyboard."""
    buffer = EditBuffer()
    assert buffer.press_key(key) is handled
    assert buffer.expression == (key if handled else "")


def test_press_key_actions() -> None:
    """Enter evaluates, Backspace deletes and Escape clears."""
    buffer = EditBuffer()
    for key in "2^10":
        buffer.press_key(key)
    buffer.press_key("Enter")
    assert buffer.result == "1024"
    buffer.press_key("Backspace")
    assert buffer.expression == "2^1"
    buffer.press_key("Escape")
    assert buffer.expression == ""
    assert buffer.result == ""


def test_settings_apply_to_result() -> None:
    """Display settings are used when evaluating."""
    buffer = EditBuffer(expression="2/3", settings=DisplaySettings(precision=2))
    assert buffer.evaluate() == "0.67"
