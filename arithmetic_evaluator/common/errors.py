"""Exceptions raised while evaluating arithmetic expressions."""


class EvaluationError(ValueError):
    """Base class for every failure while evaluating an expression."""


class LexicalError(EvaluationError):
    """An unrecognized character was found while tokenizing."""

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"Unknown character {character!r} at position {position}")


class StructuralError(EvaluationError):
    """Operators and operands do not combine into a single value."""
