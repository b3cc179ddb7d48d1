"""Test the command-line entrypoint."""
from pathlib import Path

import pytest

from arithmetic_evaluator.main import CliArgs, main, parse_args


def test_main_prints_demonstration_value(capsys) -> None:
    """Without arguments the demonstration expression is printed."""
    assert main([]) == 0
    assert capsys.readouterr().out == "-15.0\n"


def test_main_evaluates_arguments(capsys) -> None:
    """Expressions given as arguments are printed with their results."""
    assert main(["3 * 4 + 5 - 2", "3 / 2"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["3 * 4 + 5 - 2 = 15.0", "3 / 2 = 1.5"]


def test_main_reports_failure(capsys) -> None:
    """A malformed expression makes the exit status non-zero."""
    assert main(["1 +"]) == 1
    assert "-> ERROR" in capsys.readouterr().out


def test_main_evaluates_file(tmp_path: Path) -> None:
    """An operations file is evaluated into a results file."""
    input_file = tmp_path / "ops.txt"
    input_file.write_text("1 + 1\n\n(1 + 2) * 4 / 2\n")

    assert main(["-f", str(input_file)]) == 0

    output_file = tmp_path / "ops_txt_results.txt"
    assert output_file.read_text() == "1 + 1 = 2.0\n(1 + 2) * 4 / 2 = 6.0\n"


def test_main_explicit_output(tmp_path: Path) -> None:
    """The results file location can be chosen."""
    input_file = tmp_path / "ops.txt"
    input_file.write_text("2 * 2\n")
    output_file = tmp_path / "out.txt"

    main(["-f", str(input_file), "-o", str(output_file)])

    assert output_file.read_text() == "2 * 2 = 4.0\n"


def test_parse_args_valid(tmp_path: Path) -> None:
    """Arguments are validated into CliArgs."""
    input_file = tmp_path / "ops.txt"
    input_file.write_text("1\n")
    args = parse_args(["-v", "-f", str(input_file), "1 + 1"])
    assert isinstance(args, CliArgs)
    assert args.verbose is True
    assert args.expressions == ["1 + 1"]
    assert args.file_path == input_file


def test_parse_args_missing_file(tmp_path: Path) -> None:
    """A missing operations file is a usage error."""
    with pytest.raises(SystemExit):
        parse_args(["-f", str(tmp_path / "missing.txt")])
