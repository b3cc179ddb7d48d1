"""Evaluate many arithmetic expressions and report one outcome per line."""
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_evaluator.common.errors import EvaluationError
from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.operations import (
    OperationError,
    OperationRequest,
    OperationResult,
    Outcome,
)
from arithmetic_evaluator.common.parser import ExpressionParser


class BatchEvaluator(BaseModel):
    """
    Evaluate a sequence of arithmetic expressions, one per line.

    Lifecycle:
        - Each expression is evaluated independently
        - A malformed expression aborts only its own evaluation
        - Outcomes are written to the output file as soon as they are known
    """

    # Make the Pydantic instance immutable (read-only)
    model_config = ConfigDict(frozen=True)

    output_file: Optional[Path] = Field(default=None, description="Path to write computation results")

    def evaluate_line(self, expression: str, line_number: int = 1) -> Outcome:
        """
        Evaluate a single expression, turning evaluation failures into an error outcome.

        :param str expression: Arithmetic expression
        :param int line_number: Line number of expression in input

        :return: Result or error for the expression
        :rtype: Outcome
        :raises pydantic.ValidationError: If the expression is empty
        """
        request = OperationRequest(expression=expression, line_number=line_number)
        logger.debug(f"👷🏁 Evaluating line {request.line_number}: {request.expression}")

        try:
            result: float = ExpressionParser.evaluate(request.expression)
        except (EvaluationError, RecursionError) as exc:
            logger.error(
                f"👷❌ Evaluation failed on line {request.line_number}: {exc}\n"
                f"Invalid arithmetic expression, could not evaluate: {request.expression!r}"
            )
            return OperationError(
                expression=request.expression, error=str(exc), line_number=request.line_number
            )

        logger.debug(f"👷✅ Line {request.line_number} evaluated: {result}")
        return OperationResult(
            expression=request.expression, result=result, line_number=request.line_number
        )

    def evaluate_lines(self, lines: Iterable[str]) -> List[Outcome]:
        """
        Evaluate every non-empty line.

        :param Iterable[str] lines: Raw input lines

        :return: Outcomes in input order
        :rtype: List[Outcome]
        """
        expressions: List[str] = [line.strip() for line in lines if line.strip()]
        return [
            self.evaluate_line(expr, line_number)
            for line_number, expr in enumerate(expressions, start=1)
        ]

    def run(self, lines: Iterable[str]) -> List[Outcome]:
        """
        Evaluate every non-empty line and write the formatted outcomes.

        Outcomes are written to output_file when it is set, flushing after
        each line so that progress survives an interruption.

        :param Iterable[str] lines: Raw input lines

        :return: Outcomes in input order
        :rtype: List[Outcome]
        """
        outcomes: List[Outcome] = self.evaluate_lines(lines)

        if self.output_file is not None:
            with self.output_file.open("w", encoding="utf-8") as f_out:
                for outcome in outcomes:
                    f_out.write(f"{outcome.format()}\n")
                    f_out.flush()
            logger.info(f"✉️ Results written to {self.output_file}")

        failures = sum(isinstance(outcome, OperationError) for outcome in outcomes)
        logger.info(f"🧮 Evaluated {len(outcomes)} expressions, {failures} failed")
        return outcomes


def build_output_path(input_path: Path) -> Path:
    """
    Construct an output file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/operations.txt
    output: resources/operations_txt_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    stem = input_path.name[: len(input_path.name) - len("".join(input_path.suffixes))]
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")
