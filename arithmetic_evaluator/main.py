"""
Command-line entrypoint.

This script:
- Prints a demonstration value when called without arguments
- Evaluates expressions given as arguments
- Evaluates an operations file, one expression per line, writing a results file
"""
import argparse
from pathlib import Path
import sys
from typing import List, Optional

from pydantic import BaseModel, Field, FilePath, ValidationError

from arithmetic_evaluator.batch import BatchEvaluator, build_output_path
from arithmetic_evaluator.common.logger import logger, set_verbose
from arithmetic_evaluator.common.operations import OperationError, Outcome
from arithmetic_evaluator.common.parser import evaluate_text


DEMO_EXPRESSION: str = "5 * -3"


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expressions : List[str]
        Expressions given on the command line.
    file_path : Optional[FilePath]
        Path to a file containing arithmetic operations.
    output_file : Optional[Path]
        Where to write the results of file_path.
    verbose : bool
        Enable debug logging.
    """

    expressions: List[str] = Field(default_factory=list)
    file_path: Optional[FilePath] = None
    output_file: Optional[Path] = None
    verbose: bool = False


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to sys.argv[1:]
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(description="Evaluate arithmetic expressions")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Arithmetic expressions to evaluate",
    )
    parser.add_argument(
        "-f", "--file",
        dest="file_path",
        help="Path to a file containing arithmetic operations, one per line",
    )
    parser.add_argument(
        "-o", "--output",
        dest="output_file",
        help="Path of the results file (defaults to <input>_results.txt)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    try:
        return CliArgs(**{key: value for key, value in vars(args).items() if value is not None})
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function of the command-line tool.

    :return: Exit status, 1 if any expression failed
    :rtype: int
    """
    cli_args = parse_args(argv)
    set_verbose(cli_args.verbose)

    if cli_args.file_path is None and not cli_args.expressions:
        print(evaluate_text(DEMO_EXPRESSION))
        return 0

    outcomes: List[Outcome] = []

    if cli_args.expressions:
        printed = BatchEvaluator().run(cli_args.expressions)
        for outcome in printed:
            print(outcome.format())
        outcomes.extend(printed)

    if cli_args.file_path is not None:
        input_path: Path = Path(cli_args.file_path)
        output_path: Path = cli_args.output_file or build_output_path(input_path)
        logger.info(f"📄 Reading operations from {input_path}")
        evaluator = BatchEvaluator(output_file=output_path)
        outcomes.extend(evaluator.run(input_path.read_text(encoding="utf-8").splitlines()))

    return int(any(isinstance(outcome, OperationError) for outcome in outcomes))


if __name__ == "__main__":
    sys.exit(main())
