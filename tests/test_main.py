"""Test the command-line entrypoint."""
from pathlib import Path

import pytest

from button_calculator.common.config import CalculatorSettings
from button_calculator.main import build_output_path, main, parse_args, run_tape


@pytest.mark.parametrize("name,expected", [
    ("tape.txt", "tape_txt_results.txt"),
    ("tape.zip", "tape_zip_results.txt"),
    ("tape.tar.xz", "tape_tar_xz_results.txt"),
    ("tape.7z", "tape_7z_results.txt"),
])
def test_build_output_path(tmp_path: Path, name: str, expected: str) -> None:
    """The transcript lands next to the tape with a flattened suffix."""
    assert build_output_path(tmp_path / name) == tmp_path / expected


def test_parse_args_defaults() -> None:
    """Without arguments the window mode is selected."""
    args = parse_args([])
    assert args.tape_file is None
    assert args.max_operand_length is None
    assert args.verbose is False


def test_parse_args_tape(tmp_path: Path) -> None:
    """A tape path and options are validated."""
    tape = tmp_path / "tape.txt"
    tape.write_text("1")
    args = parse_args([str(tape), "--max-operand-length", "8", "--verbose"])
    assert args.tape_file == tape
    assert args.max_operand_length == 8
    assert args.verbose is True


@pytest.mark.parametrize("argv", [["missing.txt"], ["--max-operand-length", "0"]])
def test_parse_args_invalid(argv: list) -> None:
    """Invalid arguments exit through the argument parser."""
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_run_tape_writes_transcript(tmp_path: Path) -> None:
    """run_tape returns the final display and writes the transcript."""
    tape = tmp_path / "chain.txt"
    tape.write_text("6 × 2 =\n")

    display = run_tape(tape, CalculatorSettings())

    assert display == "12"
    transcript = (tmp_path / "chain_txt_results.txt").read_text(encoding="utf-8")
    assert transcript.splitlines() == ["6 -> 6", "× -> 6", "2 -> 2", "= -> 12"]


def test_main_prints_final_display(tmp_path: Path, capsys) -> None:
    """main replays the tape and prints the last display."""
    tape = tmp_path / "tape.txt"
    tape.write_text("1 2 3 4 + 1 =")

    main([str(tape), "--max-operand-length", "3"])

    assert capsys.readouterr().out.strip() == "124"


def test_main_bad_tape_exits(tmp_path: Path) -> None:
    """A tape with an unknown label ends with exit status 1."""
    tape = tmp_path / "tape.txt"
    tape.write_text("1 % 2")

    with pytest.raises(SystemExit) as exc_info:
        main([str(tape)])
    assert exc_info.value.code == 1
