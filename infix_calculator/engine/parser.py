"""Convert infix tokens to Reverse Polish Notation."""
from typing import List

from infix_calculator.common.errors import ExpressionSyntaxError, LexError
from infix_calculator.common.logger import logger
from infix_calculator.common.tokens import Token, TokenKind
from infix_calculator.engine.operators import (
    LEFT,
    OPERATORS,
    PERCENT_PRECEDENCE,
    precedence_of,
)


class ExpressionParser:
    """
    Reorder infix tokens into postfix order with the Shunting-yard algorithm.

    The Shunting-yard algorithm converts an infix expression into Reverse Polish Notation (RPN), allowing
    stack-based evaluation without parentheses. Operators wait on a stack until an operator of lower
    precedence, a closing parenthesis or the end of input pushes them to the output.

    Precedence (higher binds tighter):
        - ``^``: 4, right-associative
        - ``%``: 3, postfix
        - ``*`` ``/``: 2, left-associative
        - ``+`` ``-``: 1, left-associative

    Examples:
        - Infix expression (standard notation): 3 + 4 * 2
        - Corresponding Reverse Polish Notation (RPN): 3 4 2 * +
        - Right associativity: 2 ^ 3 ^ 2 -> 2 3 2 ^ ^
    """

    @staticmethod
    def _is_operator(token: Token) -> bool:
        return token.kind in (TokenKind.OPERATOR, TokenKind.PERCENT)

    @staticmethod
    def _should_pop(token: Token, top: Token) -> bool:
        """
        Decide whether the stack top leaves the stack before ``token`` is pushed.

        :param Token token: Incoming binary operator
        :param Token top: Current operator stack top

        :return: True if ``top`` must be moved to the output first
        :rtype: bool
        """
        if not ExpressionParser._is_operator(top):
            return False
        spec = OPERATORS[token.symbol]
        top_prec = precedence_of(top.symbol)
        if spec.associativity == LEFT:
            return spec.precedence <= top_prec
        return spec.precedence < top_prec

    @staticmethod
    def to_rpn(tokens: List[Token]) -> List[Token]:
        """
        Convert a list of tokens into Reverse Polish Notation (RPN) using the Shunting-yard algorithm.

        :param List[Token] tokens: Infix tokens

        :return: Tokens in RPN order, without parentheses
        :rtype: List[Token]
        :raises ExpressionSyntaxError: If parentheses do not balance
        """
        output: List[Token] = []
        stack: List[Token] = []

        for token in tokens:
            if token.kind is TokenKind.NUMBER:
                # Numbers are added directly to the output
                output.append(token)

            elif token.kind is TokenKind.PERCENT:
                while (
                    stack
                    and ExpressionParser._is_operator(stack[-1])
                    and precedence_of(stack[-1].symbol) >= PERCENT_PRECEDENCE
                ):
                    output.append(stack.pop())
                stack.append(token)

            elif token.kind is TokenKind.OPERATOR:
                while stack and ExpressionParser._should_pop(token, stack[-1]):
                    output.append(stack.pop())
                stack.append(token)

            elif token.kind is TokenKind.LEFT_PAREN:
                stack.append(token)

            elif token.kind is TokenKind.RIGHT_PAREN:
                while stack and stack[-1].kind is not TokenKind.LEFT_PAREN:
                    output.append(stack.pop())
                if not stack:
                    raise ExpressionSyntaxError("Mismatched parentheses")
                # Discard the matching '('
                stack.pop()

            else:
                raise LexError(f"Unknown token: {token.symbol}")

        # Drain remaining operators, stack top first
        while stack:
            token = stack.pop()
            if token.is_paren:
                raise ExpressionSyntaxError("Mismatched parentheses")
            output.append(token)

        logger.debug(f"🔁 RPN: {' '.join(str(t) for t in output)}")
        return output
