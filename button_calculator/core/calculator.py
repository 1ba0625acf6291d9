"""Two-operand calculator state machine driven by keypad events."""
from typing import Callable, Dict, Optional

from pydantic import BaseModel, Field, PrivateAttr

from button_calculator.common.config import CalculatorSettings
from button_calculator.common.logger import logger
from button_calculator.common.models import (
    CalculatorEvent,
    CalculatorSnapshot,
    ClearAllEvent,
    ClearLastEvent,
    ComputeEvent,
    DecimalEvent,
    DigitEvent,
    Operator,
    OperatorEvent,
)
from button_calculator.common.operations import (
    apply_operator,
    accepts_decimal_point,
    format_result,
    is_error,
    parse_operand,
)


EMPTY_DISPLAY = "0"


class CalculatorStateMachine(BaseModel):
    """
    Calculator core holding two operand strings and one pending operator.

    State:
        - The first operand receives input while no operator is pending.
        - The second operand receives input once an operator is pending.
        - The display always shows the active operand, the last result or "Error".

    Every event is absorbed: incomplete or invalid input sequences are no-ops
    and division by zero is shown as "Error" instead of raising.
    """

    settings: CalculatorSettings = Field(
        default_factory=CalculatorSettings, description="Entry rules for this calculator"
    )

    _first: str = PrivateAttr(default="")
    _second: str = PrivateAttr(default="")
    _operator: Optional[Operator] = PrivateAttr(default=None)
    _display: str = PrivateAttr(default=EMPTY_DISPLAY)

    @property
    def display(self) -> str:
        """Text currently shown to the user."""
        return self._display

    def snapshot(self) -> CalculatorSnapshot:
        """
        Capture the current state.

        :return: Immutable copy of operands, pending operator and display
        :rtype: CalculatorSnapshot
        """
        return CalculatorSnapshot(
            first_operand=self._first,
            second_operand=self._second,
            operator=self._operator,
            display=self._display,
        )

    def handle(self, event: CalculatorEvent) -> None:
        """
        Apply one input event and update the display.

        :param CalculatorEvent event: Event produced by the presentation layer

        :return: None
        :raises TypeError: If event is not a calculator event
        """
        if not isinstance(
            event,
            (DigitEvent, DecimalEvent, OperatorEvent, ClearLastEvent, ClearAllEvent, ComputeEvent),
        ):
            raise TypeError(f"Unsupported calculator event: {event!r}")

        handlers: Dict[str, Callable[[], None]] = {
            "digit": lambda: self._enter_digit(event.digit),
            "decimal": self._enter_decimal,
            "operator": lambda: self._enter_operator(event.operator),
            "clear_last": self._clear_last,
            "clear_all": self._clear_all,
            "compute": self._compute,
        }
        handlers[event.kind]()
        logger.debug(f"🧮 {event.kind} -> display={self._display!r}")

    # --- Active operand helpers ---

    def _active(self) -> str:
        return self._first if self._operator is None else self._second

    def _set_active(self, text: str) -> None:
        if self._operator is None:
            self._first = text
        else:
            self._second = text
        self._display = text

    def _has_room(self, text: str) -> bool:
        """Return True if one more character fits into the operand."""
        limit = self.settings.max_operand_length
        if limit is not None and len(text) >= limit:
            logger.debug(f"🧮✋ Operand length limit {limit} reached, input ignored")
            return False
        return True

    # --- Operations ---

    def _enter_digit(self, digit: str) -> None:
        current = self._active()
        if self._has_room(current):
            self._set_active(current + digit)

    def _enter_decimal(self) -> None:
        current = self._active()
        # At most one decimal point, never inside an exponent result
        if not accepts_decimal_point(current) or not self._has_room(current):
            return
        self._set_active(current + ".")

    def _enter_operator(self, op: Operator) -> None:
        # Chained operation: collapse the pending one first
        if self._first and self._second:
            self._compute()

        # No operator can be set before the first operand exists
        if self._first:
            self._operator = op

    def _compute(self) -> None:
        first = parse_operand(self._first)
        second = parse_operand(self._second)

        if first is None or second is None or self._operator is None:
            logger.debug("🧮 Compute ignored, operation is incomplete")
            return

        op = self._operator
        result = apply_operator(op, first, second)
        text = format_result(result)

        # Result becomes the first operand of the next operation
        self._clear_all()
        if is_error(result):
            logger.warning(f"🧮❌ {first} {op.value} {second} has no result, showing {text!r}")
        else:
            self._first = text
        self._display = text

    def _clear_last(self) -> None:
        if self._operator is None:
            if self._first:
                self._first = self._first[:-1]
                self._display = self._first or EMPTY_DISPLAY
        elif self._second:
            self._second = self._second[:-1]
            self._display = self._second or EMPTY_DISPLAY
        else:
            # Step back out of the operator selection
            self._operator = None
            self._display = self._first or EMPTY_DISPLAY

    def _clear_all(self) -> None:
        self._first = ""
        self._second = ""
        self._operator = None
        self._display = EMPTY_DISPLAY
