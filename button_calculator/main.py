"""
Main entrypoint of the calculator.

This script either:
- Opens the calculator window (no argument), or
- Replays a key tape through the calculator and writes a transcript
  of the display after every press next to the tape.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, FilePath, ValidationError

from button_calculator.common.config import CalculatorSettings
from button_calculator.common.logger import logger, set_log_level
from button_calculator.core.calculator import CalculatorStateMachine
from button_calculator.replay.tape import KeyTape, replay, write_transcript


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    tape_file : Optional[FilePath]
        Key tape to replay; the window is opened when absent.
    max_operand_length : Optional[int]
        Maximum characters accepted per operand.
    verbose : bool
        Enable debug logging.
    """

    tape_file: Optional[FilePath] = None
    max_operand_length: Optional[int] = Field(default=None, ge=1)
    verbose: bool = False


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param list argv: Arguments to parse, defaults to sys.argv

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(description="Two-operand button calculator")

    parser.add_argument(
        "tape_file",
        nargs="?",
        help="Key tape (.txt, .zip, .tar.xz or .7z) to replay instead of opening the window",
    )
    parser.add_argument(
        "--max-operand-length",
        type=int,
        default=None,
        help="Maximum number of characters per operand",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    try:
        return CliArgs(
            tape_file=args.tape_file,
            max_operand_length=args.max_operand_length,
            verbose=args.verbose,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct the transcript path based on the tape file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: tapes/chained.tar.xz
    output: tapes/chained_tar_xz_results.txt

    :param input_path: Path to the tape file
    :return: Path to the transcript file
    """
    # Path.stem only drops the last suffix
    base_name = input_path.name[: len(input_path.name) - len("".join(input_path.suffixes))]
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    return input_path.with_name(f"{base_name}{suffix_safe}_results.txt")


def run_tape(tape_file: Path, settings: CalculatorSettings) -> str:
    """
    Replay a key tape and write its transcript.

    :param Path tape_file: Key tape to replay
    :param CalculatorSettings settings: Calculator settings

    :return: Display text after the last press
    :rtype: str
    """
    calculator = CalculatorStateMachine(settings=settings)
    labels = KeyTape(path=tape_file).read_labels()
    steps = replay(calculator, labels)
    write_transcript(steps, build_output_path(tape_file))
    return calculator.display


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main function used by the console script.
    """
    cli_args = parse_args(argv)
    if cli_args.verbose:
        set_log_level(logging.DEBUG)

    settings = CalculatorSettings(max_operand_length=cli_args.max_operand_length)

    if cli_args.tape_file is None:
        # Imported lazily, tkinter is only needed for the window
        from button_calculator.ui.window import run_window

        run_window(CalculatorStateMachine(settings=settings))
        return

    try:
        display = run_tape(Path(cli_args.tape_file), settings)
    except ValueError as exc:
        logger.error(f"📼❌ Tape could not be replayed: {exc}")
        raise SystemExit(1) from exc
    print(display)


if __name__ == "__main__":
    main()
