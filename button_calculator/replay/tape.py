"""Replay recorded keypad presses through the calculator."""
from pathlib import Path
import tarfile
import tempfile
from typing import Callable, Dict, List
import zipfile

import py7zr
from pydantic import BaseModel, ConfigDict, Field, FilePath

from button_calculator.common.logger import logger
from button_calculator.core.calculator import CalculatorStateMachine
from button_calculator.ui.keypad import event_for_label


COMMENT_PREFIX = "#"


class ReplayStep(BaseModel):
    """One replayed button press and the display it produced."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1, description="Keypad label that was pressed")
    display: str = Field(..., min_length=1, description="Display text after the press")


def _first_tape_name(names: List[str], container: str) -> str:
    """
    Pick the tape inside an archive: the first member ending in ".txt".

    :raises ValueError: If the archive holds no .txt member
    """
    for name in names:
        if name.endswith(".txt"):
            return name
    raise ValueError(f"📼❌ No .txt tape found in {container} archive")


def _read_text(path: Path) -> bytes:
    return path.read_bytes()


def _read_zip(path: Path) -> bytes:
    with zipfile.ZipFile(path, "r") as zf:
        return zf.read(_first_tape_name(zf.namelist(), "zip"))


def _read_tar_xz(path: Path) -> bytes:
    with tarfile.open(path, "r:xz") as tf:
        files = {member.name: member for member in tf.getmembers() if member.isfile()}
        member = files[_first_tape_name(list(files), "tar.xz")]
        # Regular members always yield a file object
        return tf.extractfile(member).read()


def _read_7z(path: Path) -> bytes:
    with py7zr.SevenZipFile(path, mode="r") as archive:
        name = _first_tape_name(archive.getnames(), "7z")
        # py7zr only extracts to disk, so go through a scratch directory
        with tempfile.TemporaryDirectory() as tmpdir:
            archive.extract(path=tmpdir, targets=[name])
            return (Path(tmpdir) / name).read_bytes()


# Container suffix -> reader returning the raw tape bytes
TAPE_READERS: Dict[str, Callable[[Path], bytes]] = {
    ".txt": _read_text,
    ".zip": _read_zip,
    ".tar.xz": _read_tar_xz,
    ".7z": _read_7z,
}


def container_of(path: Path) -> str:
    """
    Return the container suffix of a tape path, e.g. ".tar.xz" or ".zip".

    :param Path path: Tape path

    :rtype: str
    """
    double = "".join(path.suffixes[-2:])
    return double if double in TAPE_READERS else path.suffix


class KeyTape(BaseModel):
    """
    Key tape: a text file of keypad labels, optionally packed in an archive.

    Format:
        - Labels are separated by whitespace, e.g. "3 + 4 =".
        - Anything after "#" on a line is a comment.

    Supported containers:
        - .txt
        - .zip
        - .tar.xz
        - .7z
    """

    model_config = ConfigDict(frozen=True)

    path: FilePath = Field(..., description="Path to the tape file or archive")

    def read_labels(self) -> List[str]:
        """
        Load the keypad labels stored on the tape.

        :return: Labels in press order
        :rtype: List[str]
        :raises ValueError: If the container is unsupported or holds no .txt tape
        """
        container = container_of(self.path)
        reader = TAPE_READERS.get(container)
        if reader is None:
            raise ValueError(f"📼❌ Unsupported tape format: {container or self.path.name}")

        labels: List[str] = []
        for line in reader(self.path).decode("utf-8").splitlines():
            labels.extend(line.split(COMMENT_PREFIX, 1)[0].split())
        logger.info(f"📼 Loaded {len(labels)} key presses from {self.path.name}")
        return labels


def replay(calculator: CalculatorStateMachine, labels: List[str]) -> List[ReplayStep]:
    """
    Press each label on the calculator and record the resulting display.

    :param CalculatorStateMachine calculator: Calculator receiving the presses
    :param List[str] labels: Keypad labels in press order

    :return: One step per label
    :rtype: List[ReplayStep]
    :raises ValueError: If a label is not on the keypad
    """
    steps: List[ReplayStep] = []
    for label in labels:
        calculator.handle(event_for_label(label))
        steps.append(ReplayStep(label=label, display=calculator.display))
    return steps


def write_transcript(steps: List[ReplayStep], output_file: Path) -> None:
    """
    Write one "<label> -> <display>" line per replayed step.

    :param List[ReplayStep] steps: Replayed steps
    :param Path output_file: Destination file, overwritten
    """
    with output_file.open("w", encoding="utf-8") as f_out:
        for step in steps:
            f_out.write(f"{step.label} -> {step.display}\n")
    logger.info(f"📼✅ Transcript written to {output_file}")
