"""Split a normalized expression into tokens."""
from typing import List

from infix_calculator.common.errors import LexError
from infix_calculator.common.logger import logger
from infix_calculator.common.tokens import (
    BINARY_OPERATORS,
    DECIMAL_POINT,
    DIGITS,
    LEFT_PAREN,
    PERCENT,
    RIGHT_PAREN,
    Token,
)


def _is_number_literal(run: str) -> bool:
    """
    Check that a digit/point run reads ``digits`` or ``digits.digits``.

    :param str run: Consecutive digits and decimal points

    :return: True if the run is a well-formed number
    :rtype: bool
    """
    parts = run.split(DECIMAL_POINT)
    if len(parts) > 2:
        return False
    return all(part and all(ch in DIGITS for ch in part) for part in parts)


def _number_token(run: str) -> Token:
    if not _is_number_literal(run):
        raise LexError(f"Unknown token: {run}")
    return Token.number(run)


def _symbol_token(ch: str) -> Token:
    if ch in BINARY_OPERATORS:
        return Token.operator(ch)
    if ch == PERCENT:
        return Token.percent()
    if ch == LEFT_PAREN:
        return Token.left_paren()
    if ch == RIGHT_PAREN:
        return Token.right_paren()
    raise LexError(f"Unknown token: {ch}")


def tokenize(expr: str) -> List[Token]:
    """
    Scan a normalized expression left to right into tokens.

    Consecutive digits and decimal points build one number; every other
    character is a token of its own.

    :param str expr: Normalized expression

    :return: Tokens in scan order
    :rtype: List[Token]
    :raises LexError: On an unknown character or a malformed number
    """
    tokens: List[Token] = []
    run: List[str] = []

    for ch in expr:
        if ch in DIGITS or ch == DECIMAL_POINT:
            run.append(ch)
            continue
        if run:
            tokens.append(_number_token("".join(run)))
            run = []
        tokens.append(_symbol_token(ch))

    if run:
        tokens.append(_number_token("".join(run)))

    logger.debug(f"🔤 Tokenized {expr!r} into {len(tokens)} tokens")
    return tokens
