"""Split arithmetic expression text into tokens."""
from typing import Dict, List, Optional, Tuple

from arithmetic_evaluator.common.errors import LexicalError
from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.tokens import Token, TokenKind


# Characters that map directly to a token kind
SINGLE_CHAR_TOKENS: Dict[str, TokenKind] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "+": TokenKind.OP_ADD,
    "*": TokenKind.OP_MUL,
    "/": TokenKind.OP_DIV,
}

NUMBER_CHARS: str = "0123456789."

# Token kinds after which "-" is a binary subtraction
OPERAND_END_KINDS = frozenset({TokenKind.NUMBER, TokenKind.RIGHT_PAREN})


def _scan_number(expression: str, pos: int) -> Tuple[str, int]:
    """
    Greedily consume digits and decimal points starting at pos.

    :param str expression: Source text
    :param int pos: Index of the first character to consume

    :return: Tuple of (number text, index of the first unconsumed character)
    :rtype: Tuple[str, int]
    """
    end = pos
    while end < len(expression) and expression[end] in NUMBER_CHARS:
        end += 1
    return expression[pos:end], end


def tokenize(expression: str) -> List[Token]:
    """
    Convert an arithmetic expression into a list of tokens.

    A "-" following a number or a closing parenthesis is a subtraction;
    anywhere else it is a sign, folded into the text of the number that
    immediately follows it (e.g. "(1 + -2)" yields the number "-2").

    :param str expression: Arithmetic expression as a string

    :return: Tokens in source order
    :rtype: List[Token]
    :raises LexicalError: If an unknown character is found
    """
    tokens: List[Token] = []
    last_kind: Optional[TokenKind] = None
    pos = 0

    while pos < len(expression):
        char = expression[pos]

        if char.isspace():
            pos += 1
            continue

        if char in NUMBER_CHARS:
            text, pos = _scan_number(expression, pos)
            token = Token.number(text)
        elif char == "-":
            if last_kind in OPERAND_END_KINDS:
                token = Token.of(TokenKind.OP_SUB)
                pos += 1
            else:
                digits, pos = _scan_number(expression, pos + 1)
                token = Token.number("-" + digits)
        elif char in SINGLE_CHAR_TOKENS:
            token = Token.of(SINGLE_CHAR_TOKENS[char])
            pos += 1
        else:
            raise LexicalError(char, pos)

        last_kind = token.kind
        tokens.append(token)

    logger.debug("🔤 Tokenized %r into %d tokens", expression, len(tokens))
    return tokens
