"""Lexical tokens produced by the tokenizer."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenKind(str, Enum):
    """Kinds of lexical tokens."""

    NUMBER = "number"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    OP_ADD = "+"
    OP_SUB = "-"
    OP_MUL = "*"
    OP_DIV = "/"


class Token(BaseModel):
    """
    A single lexical token.

    Numbers keep their source text (a folded unary minus included) and are
    only converted to float when the value tree is evaluated.
    """

    model_config = ConfigDict(frozen=True)

    kind: TokenKind = Field(..., description="Kind of the token")
    text: Optional[str] = Field(default=None, description="Source text of a number token")

    @classmethod
    def number(cls, text: str) -> "Token":
        """Build a NUMBER token from its source text."""
        return cls(kind=TokenKind.NUMBER, text=text)

    @classmethod
    def of(cls, kind: TokenKind) -> "Token":
        """Build a token that carries no text."""
        return cls(kind=kind)

    def __str__(self) -> str:
        return self.text if self.kind is TokenKind.NUMBER else self.kind.value
