"""Parse and evaluate arithmetic expressions."""
from typing import Dict, List, Sequence, Tuple

from arithmetic_evaluator.common.errors import StructuralError
from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.tokenizer import tokenize
from arithmetic_evaluator.common.tokens import Token, TokenKind
from arithmetic_evaluator.common.values import ExpressionValue, LiteralValue, Operator, Value


# Mapping of operator token kinds to their precedence
PRECEDENCE: Dict[TokenKind, int] = {
    TokenKind.OP_ADD: 1,
    TokenKind.OP_SUB: 1,
    TokenKind.OP_MUL: 2,
    TokenKind.OP_DIV: 2,
}


class ExpressionParser:
    """
    Parse and evaluate arithmetic expressions.

    Design constraints:
        - No eval(), no dynamic code execution
        - Input grammar is trusted: malformed input aborts with an exception

    Algorithm:
        1. Tokenize, folding unary minus into number literals
        2. Scan the tokens once with a value stack and an operator stack
        3. Recurse at each "(" so that a group becomes a single value
        4. Evaluate the resulting value tree

    Operators are deferred on the operator stack until precedence allows
    them to be combined with the two topmost values (a reduction):
        - "+" and "-" reduce every pending operator before being pushed
        - "*" and "/" reduce only a pending "*" or "/" directly beneath them

    Examples:
        - 3 * 4 + 5 - 2 -> ((3 * 4) + 5) - 2 = 15
        - 1 + 2 * 3 -> 1 + (2 * 3) = 7
    """

    @staticmethod
    def tokenize(expr: str) -> List[Token]:
        """
        Split an arithmetic expression into tokens.

        :param str expr: Arithmetic expression as a string

        :return: List of tokens
        :rtype: List[Token]
        """
        return tokenize(expr)

    @staticmethod
    def _reduce_once(values: List[Value], operators: List[TokenKind]) -> None:
        """
        Pop one pending operator and combine the two topmost values with it.

        :param List[Value] values: Value stack
        :param List[TokenKind] operators: Operator stack

        :raises StructuralError: If either stack runs out
        """
        if not operators:
            raise StructuralError("No pending operator to reduce")
        op = Operator.from_token(operators.pop())
        if len(values) < 2:
            raise StructuralError(f"Not enough operands for {op.value!r}")
        right: Value = values.pop()
        left: Value = values.pop()
        values.append(ExpressionValue(operator=op, left=left, right=right))

    @staticmethod
    def _reduce(values: List[Value], operators: List[TokenKind]) -> None:
        """
        Reduce every pending operator, most recently pushed first.

        :param List[Value] values: Value stack
        :param List[TokenKind] operators: Operator stack
        """
        while operators:
            ExpressionParser._reduce_once(values, operators)

    @staticmethod
    def evaluate_tokens(tokens: Sequence[Token], start: int = 0) -> Tuple[Value, int]:
        """
        Build the value of the tokens from start up to the end or a ")".

        The closing parenthesis is not consumed: the returned position points
        at it, and the caller that opened the group steps past it.

        :param Sequence[Token] tokens: Tokens produced by tokenize
        :param int start: Index of the first token to read

        :return: Tuple of (value, index where scanning stopped)
        :rtype: Tuple[Value, int]
        :raises StructuralError: If operators and operands do not combine
        """
        values: List[Value] = []
        operators: List[TokenKind] = []
        pos = start

        while pos < len(tokens):
            token = tokens[pos]
            kind = token.kind

            if kind is TokenKind.NUMBER:
                values.append(LiteralValue(text=token.text))
            elif kind in (TokenKind.OP_ADD, TokenKind.OP_SUB):
                ExpressionParser._reduce(values, operators)
                operators.append(kind)
            elif kind in (TokenKind.OP_MUL, TokenKind.OP_DIV):
                if operators and PRECEDENCE[operators[-1]] == PRECEDENCE[kind]:
                    ExpressionParser._reduce_once(values, operators)
                operators.append(kind)
            elif kind is TokenKind.LEFT_PAREN:
                group, pos = ExpressionParser.evaluate_tokens(tokens, pos + 1)
                values.append(group)
            elif kind is TokenKind.RIGHT_PAREN:
                break
            else:
                raise StructuralError(f"Unexpected token {token}")

            pos += 1

        ExpressionParser._reduce(values, operators)

        if len(values) != 1:
            raise StructuralError(f"Expected a single value, found {len(values)}")
        return values.pop(), pos

    @staticmethod
    def evaluate(expr: str) -> float:
        """
        Evaluate an arithmetic expression.

        :param str expr: Arithmetic expression string

        :return: Computed result as float
        :rtype: float
        :raises LexicalError: If the expression contains an unknown character
        :raises StructuralError: If the expression is malformed
        """
        tokens: List[Token] = ExpressionParser.tokenize(expr)

        # One call frame per nesting level
        try:
            value, end = ExpressionParser.evaluate_tokens(tokens, 0)
        except RecursionError:
            raise StructuralError("Parentheses are nested too deeply") from None
        if end < len(tokens):
            raise StructuralError(f"Unmatched ')' at token {end}: {expr!r}")

        result: float = value.value()
        logger.debug("🧮 %r = %s", expr, result)
        return result


def evaluate_text(expression: str) -> float:
    """Evaluate an arithmetic expression and return its value as a float."""
    return ExpressionParser.evaluate(expression)
