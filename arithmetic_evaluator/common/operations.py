"""Pydantic models for arithmetic operation requests and results."""
from typing import Union

from pydantic import BaseModel, Field, field_validator


class OperationRequest(BaseModel):
    """Represents a single arithmetic expression to evaluate."""

    expression: str = Field(..., description="Arithmetic expression as a string")
    line_number: int = Field(default=1, ge=1, description="Line number in the input")

    @field_validator("expression")
    def expression_must_not_be_empty(cls, v: str) -> str:
        """Ensure that the expression is not empty."""
        if not v.strip():
            raise ValueError("Expression cannot be empty")
        return v


class OperationResult(BaseModel):
    """Represents the result of an evaluated arithmetic operation."""

    expression: str = Field(..., description="Original arithmetic expression")
    result: float = Field(..., description="Evaluated numeric result of the expression")
    line_number: int = Field(default=1, ge=1, description="Line number in the input")

    def format(self) -> str:
        return f"{self.expression} = {self.result}"


class OperationError(BaseModel):
    """Represents an expression that could not be evaluated."""

    expression: str = Field(..., description="Original arithmetic expression")
    error: str = Field(..., description="Reason the evaluation was aborted")
    line_number: int = Field(default=1, ge=1, description="Line number in the input")

    def format(self) -> str:
        return f"{self.expression} -> ERROR: {self.error}"


Outcome = Union[OperationResult, OperationError]
