"""Value tree built by the evaluator: literals and binary expressions."""
from collections.abc import Callable
from enum import Enum
import math
import operator
from typing import Dict, List, Tuple, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_evaluator.common.errors import StructuralError
from arithmetic_evaluator.common.tokens import TokenKind


T = TypeVar("T")


def _divide(left: float, right: float) -> float:
    """
    Divide with IEEE-754 semantics: a zero divisor gives inf, -inf or nan.

    :param float left: Dividend
    :param float right: Divisor

    :return: Quotient
    :rtype: float
    """
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


class Operator(str, Enum):
    """Binary operators an expression node can apply."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @classmethod
    def from_token(cls, kind: TokenKind) -> "Operator":
        """
        Map an operator token kind to its operator.

        :param TokenKind kind: Kind of an operator token

        :return: Matching operator
        :rtype: Operator
        :raises StructuralError: If the token kind is not an operator
        """
        try:
            return cls(kind.value)
        except ValueError:
            raise StructuralError(f"Token {kind.value!r} is not a binary operator") from None

    def apply(self, left: float, right: float) -> float:
        """Apply the operator to two numbers."""
        return OPERATIONS[self](left, right)


OPERATIONS: Dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: _divide,
}


class LiteralValue(BaseModel):
    """A value wrapping the source text of a number."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Number text, optionally sign-prefixed")

    def value(self) -> float:
        """
        Parse the literal text.

        :return: Parsed number
        :rtype: float
        :raises StructuralError: If the text is not a valid number
        """
        try:
            return float(self.text)
        except ValueError:
            raise StructuralError(f"Invalid number literal: {self.text!r}") from None

    def __str__(self) -> str:
        return self.text


class ExpressionValue(BaseModel):
    """A binary operation over two owned operands."""

    model_config = ConfigDict(frozen=True)

    operator: Operator = Field(..., description="Operator applied to both operands")
    left: "Value" = Field(..., description="Left operand")
    right: "Value" = Field(..., description="Right operand")

    def value(self) -> float:
        """Evaluate both operands and apply the operator."""
        return _fold(
            self, LiteralValue.value, lambda node, left, right: node.operator.apply(left, right)
        )

    def __str__(self) -> str:
        return _fold(
            self, str, lambda node, left, right: f"({left} {node.operator.value} {right})"
        )


Value = Union[LiteralValue, ExpressionValue]

ExpressionValue.model_rebuild()


def _fold(
    root: Value,
    on_literal: Callable[[LiteralValue], T],
    on_expression: Callable[[ExpressionValue, T, T], T],
) -> T:
    """
    Combine a value tree bottom-up without recursing.

    Chains such as "1 + 1 + ... + 1" build trees as deep as they are long,
    so the tree is walked in post-order with an explicit stack.

    :param Value root: Tree to fold
    :param on_literal: Called for each literal
    :param on_expression: Called with an expression and the folded operands

    :return: Folded result of the root
    """
    results: List[T] = []
    # (node, operands already pushed)
    stack: List[Tuple[Value, bool]] = [(root, False)]

    while stack:
        node, expanded = stack.pop()
        if isinstance(node, LiteralValue):
            results.append(on_literal(node))
        elif expanded:
            right = results.pop()
            left = results.pop()
            results.append(on_expression(node, left, right))
        else:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))

    return results.pop()
