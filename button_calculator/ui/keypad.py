"""Translate keypad button labels into calculator events."""
from typing import Dict, List

from button_calculator.common.models import (
    CalculatorEvent,
    ClearAllEvent,
    ClearLastEvent,
    ComputeEvent,
    DecimalEvent,
    DigitEvent,
    Operator,
    OperatorEvent,
)


# Glyphs drawn on the operator buttons
OPERATOR_GLYPHS: Dict[Operator, str] = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "−",
    Operator.MULTIPLY: "×",
    Operator.DIVIDE: "÷",
}

# Keyboard and key-tape spellings of the same operators
OPERATOR_ALIASES: Dict[str, Operator] = {
    "-": Operator.SUBTRACT,
    "*": Operator.MULTIPLY,
    "x": Operator.MULTIPLY,
    "/": Operator.DIVIDE,
}

CLEAR_LAST_LABEL = "C"
CLEAR_ALL_LABEL = "AC"
COMPUTE_LABEL = "="
DECIMAL_LABEL = "."

# Button grid, row by row
KEYPAD_ROWS: List[List[str]] = [
    ["7", "8", "9", OPERATOR_GLYPHS[Operator.DIVIDE]],
    ["4", "5", "6", OPERATOR_GLYPHS[Operator.MULTIPLY]],
    ["1", "2", "3", OPERATOR_GLYPHS[Operator.SUBTRACT]],
    ["0", DECIMAL_LABEL, COMPUTE_LABEL, OPERATOR_GLYPHS[Operator.ADD]],
    [CLEAR_ALL_LABEL, CLEAR_LAST_LABEL],
]

_LABEL_TO_OPERATOR: Dict[str, Operator] = {
    **{glyph: op for op, glyph in OPERATOR_GLYPHS.items()},
    **OPERATOR_ALIASES,
}


def glyph_for(op: Operator) -> str:
    """Return the button glyph of an operator."""
    return OPERATOR_GLYPHS[op]


def event_for_label(label: str) -> CalculatorEvent:
    """
    Convert a button label into the event it triggers.

    :param str label: Button label, e.g. "7", "÷", "=", "AC"

    :return: Calculator event for the label
    :rtype: CalculatorEvent
    :raises ValueError: If the label is not on the keypad
    """
    if len(label) == 1 and label.isdigit() and label.isascii():
        return DigitEvent(digit=label)
    if label == DECIMAL_LABEL:
        return DecimalEvent()
    if label == COMPUTE_LABEL:
        return ComputeEvent()
    if label == CLEAR_LAST_LABEL:
        return ClearLastEvent()
    if label == CLEAR_ALL_LABEL:
        return ClearAllEvent()
    if label in _LABEL_TO_OPERATOR:
        return OperatorEvent(operator=_LABEL_TO_OPERATOR[label])

    raise ValueError(f"⌨️❌ Unknown keypad label: {label!r}")
