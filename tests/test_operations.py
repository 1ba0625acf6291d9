"""Test arithmetic helpers used by the compute step."""
import math

import pytest

from button_calculator.common.models import Operator
from button_calculator.common.operations import (
    ERROR_SENTINEL,
    ERROR_TEXT,
    accepts_decimal_point,
    apply_operator,
    format_result,
    is_error,
    parse_operand,
)


@pytest.mark.parametrize("op,first,second,expected", [
    (Operator.ADD, 3.0, 4.0, 7.0),
    (Operator.SUBTRACT, 10.0, 2.0, 8.0),
    (Operator.MULTIPLY, 3.0, 5.0, 15.0),
    (Operator.DIVIDE, 8.0, 2.0, 4.0),
    (Operator.DIVIDE, 7.0, 2.0, 3.5),
])
def test_apply_operator(op: Operator, first: float, second: float, expected: float) -> None:
    """apply_operator returns the arithmetic result."""
    assert apply_operator(op, first, second) == expected


def test_divide_by_zero_returns_sentinel() -> None:
    """Division by zero yields the error sentinel instead of raising."""
    result = apply_operator(Operator.DIVIDE, 5.0, 0.0)
    assert math.isnan(result)
    assert is_error(result)


def test_zero_divided_is_not_error() -> None:
    """A zero dividend is a normal result."""
    assert apply_operator(Operator.DIVIDE, 0.0, 5.0) == 0.0


@pytest.mark.parametrize("text,expected", [
    ("12", 12.0),
    ("4.5", 4.5),
    ("5.", 5.0),
    (".5", 0.5),
    ("-3", -3.0),
])
def test_parse_operand_valid(text: str, expected: float) -> None:
    """parse_operand accepts complete and partial decimal forms."""
    assert parse_operand(text) == expected


@pytest.mark.parametrize("text", ["", ".", "-"])
def test_parse_operand_invalid(text: str) -> None:
    """parse_operand returns None for text that is not a number."""
    assert parse_operand(text) is None


@pytest.mark.parametrize("value,expected", [
    (4.0, "4"),
    (12.0, "12"),
    (100.0, "100"),
    (3.5, "3.5"),
    (-3.0, "-3"),
    (0.1 + 0.2, "0.30000000000000004"),
])
def test_format_result(value: float, expected: str) -> None:
    """format_result strips exactly one trailing '.0' and nothing else."""
    assert format_result(value) == expected


def test_format_result_error() -> None:
    """The error sentinel is rendered as the error text."""
    assert format_result(ERROR_SENTINEL) == ERROR_TEXT == "Error"


@pytest.mark.parametrize("text,expected", [
    ("", True),
    ("12", True),
    ("-3", True),
    ("1.5", False),
    ("1e-05", False),
    ("1e+16", False),
    ("inf", False),
])
def test_accepts_decimal_point(text: str, expected: bool) -> None:
    """Only plain integer text can take a decimal point."""
    assert accepts_decimal_point(text) is expected
