"""Arithmetic applied when a pending operation is computed."""
import math
import operator
from typing import Callable, Dict, Optional

from button_calculator.common.models import Operator


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]

# Marker produced by division by zero, rendered as ERROR_TEXT
ERROR_SENTINEL: float = math.nan
ERROR_TEXT = "Error"


def _divide(a: float, b: float) -> float:
    """
    Divide two operands without raising on a zero divisor.

    :param float a: Dividend
    :param float b: Divisor

    :return: Quotient, or ERROR_SENTINEL when the divisor is zero
    :rtype: float
    """
    if b == 0.0:
        return ERROR_SENTINEL
    return a / b


# Mapping of operators to their functions
OPERATIONS: Dict[Operator, OperatorFn] = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: _divide,
}


def apply_operator(op: Operator, first: float, second: float) -> float:
    """
    Apply a binary operator to the two operands.

    :param Operator op: Operator to apply
    :param float first: Left operand
    :param float second: Right operand

    :return: Result of the operation, possibly ERROR_SENTINEL
    :rtype: float
    """
    return OPERATIONS[op](first, second)


def is_error(value: float) -> bool:
    """Return True if value is the error sentinel (any NaN counts)."""
    return math.isnan(value)


def parse_operand(text: str) -> Optional[float]:
    """
    Parse operand text into a float.

    Supports integers, decimals and partial forms such as "5." or ".5".

    :param str text: Operand text as typed

    :return: Parsed value, or None if the text is empty or not a number
    :rtype: Optional[float]
    """
    try:
        return float(text)
    except ValueError:
        return None


def format_result(value: float) -> str:
    """
    Render a result for the display.

    Whole numbers lose exactly one trailing ".0", so 4.0 becomes "4".
    No other rounding is applied.

    :param float value: Computed result

    :return: Display text
    :rtype: str
    """
    if is_error(value):
        return ERROR_TEXT
    return str(value).removesuffix(".0")


def accepts_decimal_point(text: str) -> bool:
    """
    Return True if a decimal point may be appended to the operand.

    Only plain digit strings (optionally negative) qualify. Text that already
    holds a point, an exponent ("1e-05") or "inf" would stop parsing.

    :param str text: Operand text as typed

    :rtype: bool
    """
    digits = text[1:] if text.startswith("-") else text
    return digits == "" or digits.isdigit()
