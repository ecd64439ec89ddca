"""Headless calculator keypad: an editable expression and its last result."""
from typing import Dict, Optional

from pydantic import BaseModel, Field

from infix_calculator.common.config import DisplaySettings
from infix_calculator.common.logger import logger
from infix_calculator.common.operations import CalculationRequest
from infix_calculator.common.tokens import BINARY_OPERATORS, DECIMAL_POINT, DIGITS, LEFT_PAREN, PERCENT
from infix_calculator.engine.calculator import calculate_request

CLEAR = "C"
CLEAR_ENTRY = "CE"
BACKSPACE = "backspace"
TOGGLE_SIGN = "toggle-sign"
EQUALS = "="

# Keys typed straight into the expression
INPUT_KEYS = DIGITS + DECIMAL_POINT + "+-*/()%^"

# Keyboard keys standing for a button
KEY_ACTIONS: Dict[str, str] = {
    "Enter": EQUALS,
    "Backspace": BACKSPACE,
    "Escape": CLEAR,
}

# Characters after which a '-' is a sign of the following number
SIGN_CONTEXT = BINARY_OPERATORS + PERCENT + LEFT_PAREN


class EditBuffer(BaseModel):
    """
    Expression being typed on a calculator keypad, plus the last displayed result.

    The buffer is the only mutable state; evaluation works on a snapshot of
    ``expression`` and never changes it.
    """

    expression: str = Field(default="", description="Expression being edited")
    result: str = Field(default="", description="Last displayed result or error")
    settings: DisplaySettings = Field(default_factory=DisplaySettings, description="Result display configuration")

    def press(self, value: str) -> None:
        """
        Apply a keypad button.

        :param str value: ``C``, ``CE``, ``backspace``, ``toggle-sign``, ``=`` or text to append
        """
        if value == CLEAR:
            self.clear()
        elif value == CLEAR_ENTRY:
            self.clear_entry()
        elif value == BACKSPACE:
            self.backspace()
        elif value == TOGGLE_SIGN:
            self.toggle_sign()
        elif value == EQUALS:
            self.evaluate()
        else:
            self.expression += value

    def press_key(self, key: str) -> bool:
        """
        Apply a keyboard key.

        :param str key: Key name as reported by the keyboard (``"7"``, ``"Enter"``)

        :return: True if the key was handled
        :rtype: bool
        """
        if len(key) == 1 and key in INPUT_KEYS:
            self.press(key)
            return True
        action: Optional[str] = KEY_ACTIONS.get(key)
        if action is None:
            return False
        self.press(action)
        return True

    def clear(self) -> None:
        self.expression = ""
        self.result = ""

    def clear_entry(self) -> None:
        """Remove the trailing number."""
        end = len(self.expression)
        while end and self.expression[end - 1] in DIGITS + DECIMAL_POINT:
            end -= 1
        self.expression = self.expression[:end]

    def backspace(self) -> None:
        self.expression = self.expression[:-1]

    def _last_number_start(self) -> Optional[int]:
        end = len(self.expression)
        start = end
        while start and self.expression[start - 1] in DIGITS + DECIMAL_POINT:
            start -= 1
        if start == end or not any(ch in DIGITS for ch in self.expression[start:end]):
            return None
        return start

    def toggle_sign(self) -> None:
        """
        Negate the trailing number, or drop its sign if it already has one.

        A ``-`` counts as the number's sign when it opens the expression or
        follows an operator or ``(``; otherwise it is a subtraction and a new
        sign is inserted after it.
        """
        start = self._last_number_start()
        if start is None:
            return

        expr = self.expression
        has_sign = start > 0 and expr[start - 1] == "-" and (
            start == 1 or expr[start - 2] in SIGN_CONTEXT
        )
        if has_sign:
            self.expression = expr[: start - 1] + expr[start:]
        else:
            self.expression = expr[:start] + "-" + expr[start:]

    def evaluate(self) -> str:
        """
        Evaluate a snapshot of the expression and store the display string.

        A blank expression leaves the result untouched.

        :return: The displayed result
        :rtype: str
        """
        snapshot = self.expression
        if not snapshot.strip():
            return self.result

        outcome = calculate_request(CalculationRequest(expression=snapshot), self.settings)
        if not outcome.succeeded:
            logger.warning(f"⌨️❌ Calculation error for {snapshot!r}: {outcome.error}")
        self.result = outcome.display
        return self.result
