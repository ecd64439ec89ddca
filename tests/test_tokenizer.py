"""Test the tokenizer."""
import pytest

from infix_calculator.common.errors import LexError
from infix_calculator.common.tokens import TokenKind
from infix_calculator.engine.tokenizer import tokenize


def test_tokenize_basic() -> None:
    """Numbers, operators and parentheses become tokens in scan order."""
    tokens = tokenize("12.5+(3)%")
    assert [t.kind for t in tokens] == [
        TokenKind.NUMBER,
        TokenKind.OPERATOR,
        TokenKind.LEFT_PAREN,
        TokenKind.NUMBER,
        TokenKind.RIGHT_PAREN,
        TokenKind.PERCENT,
    ]
    assert [t.symbol for t in tokens] == ["12.5", "+", "(", "3", ")", "%"]
    assert tokens[0].value == 12.5
    assert tokens[3].value == 3.0


@pytest.mark.parametrize("symbol", ["+", "-", "*", "/", "^"])
def test_tokenize_operators(symbol: str) -> None:
    """Each binary operator is its own token."""
    tokens = tokenize(f"1{symbol}2")
    assert tokens[1].kind is TokenKind.OPERATOR
    assert tokens[1].symbol == symbol


def test_tokenize_empty() -> None:
    """An empty expression has no tokens."""
    assert tokenize("") == []


@pytest.mark.parametrize("expr,bad", [
    ("2a", "a"),
    ("2&3", "&"),
    ("1,5", ","),
    ("1.2.3", "1.2.3"),
    (".5", ".5"),
    ("5.+1", "5."),
])
def test_tokenize_rejects_unknown(expr: str, bad: str) -> None:
    """Unknown characters and malformed numbers raise LexError naming the token."""
    with pytest.raises(LexError, match=f"Unknown token: {bad}"):
        tokenize(expr)
