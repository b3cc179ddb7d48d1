"""Test function tokenize."""
import pytest

from arithmetic_evaluator.common.errors import LexicalError
from arithmetic_evaluator.common.tokenizer import tokenize
from arithmetic_evaluator.common.tokens import Token, TokenKind


def test_tokenize_basic():
    """Tokenize splits a simple expression into correct tokens."""
    tokens = tokenize("3 + 4 * 2")
    assert tokens == [
        Token.number("3"),
        Token.of(TokenKind.OP_ADD),
        Token.number("4"),
        Token.of(TokenKind.OP_MUL),
        Token.number("2"),
    ]


@pytest.mark.parametrize("expr,expected", [
    ("3+4*2", ["3", "+", "4", "*", "2"]),
    ("  12   /\t6 ", ["12", "/", "6"]),
    ("(1 + 2)", ["(", "1", "+", "2", ")"]),
    ("111.25-11", ["111.25", "-", "11"]),
    ("", []),
])
def test_tokenize_various(expr, expected):
    """Whitespace is skipped and numbers are consumed greedily."""
    assert [str(token) for token in tokenize(expr)] == expected


@pytest.mark.parametrize("expr,expected", [
    ("-5", ["-5"]),
    ("(1 + -2)", ["(", "1", "+", "-2", ")"]),
    ("4 / -2", ["4", "/", "-2"]),
    ("(-2.5)", ["(", "-2.5", ")"]),
    ("1 - -1", ["1", "-", "-1"]),
])
def test_tokenize_unary_minus(expr, expected):
    """A "-" not following an operand is folded into the next number."""
    assert [str(token) for token in tokenize(expr)] == expected


def test_tokenize_minus_after_number_is_subtraction():
    """A "-" following a number is a binary subtraction."""
    tokens = tokenize("13 - 21")
    assert [token.kind for token in tokens] == [
        TokenKind.NUMBER,
        TokenKind.OP_SUB,
        TokenKind.NUMBER,
    ]


def test_tokenize_minus_after_right_paren_is_subtraction():
    """A "-" following a closing parenthesis is a binary subtraction."""
    tokens = tokenize("(3) - 1")
    assert tokens[3].kind is TokenKind.OP_SUB


def test_tokenize_plus_is_never_a_sign():
    """"+" always produces an addition token."""
    tokens = tokenize("+3")
    assert tokens == [Token.of(TokenKind.OP_ADD), Token.number("3")]


@pytest.mark.parametrize("expr,character,position", [
    ("2 ^ 3", "^", 2),
    ("x + 1", "x", 0),
    ("1 + 2 % 3", "%", 6),
])
def test_tokenize_unknown_character(expr, character, position):
    """Unknown characters raise a LexicalError that names them."""
    with pytest.raises(LexicalError) as exc_info:
        tokenize(expr)
    assert exc_info.value.character == character
    assert exc_info.value.position == position
    assert repr(character) in str(exc_info.value)


def test_number_tokens_keep_their_text():
    """Number tokens are not converted to floats."""
    (token,) = tokenize("007.50")
    assert token.kind is TokenKind.NUMBER
    assert token.text == "007.50"
