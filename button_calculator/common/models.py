"""Pydantic models for calculator input events and observable state."""
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Operator(str, Enum):
    """Binary operation that can be pending between the two operands."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


class _Event(BaseModel):
    """Base class for input events. Events are immutable once created."""

    model_config = ConfigDict(frozen=True)


class DigitEvent(_Event):
    """A digit key was pressed."""

    kind: Literal["digit"] = "digit"
    digit: str = Field(..., pattern=r"^[0-9]$", description="Single digit character")


class DecimalEvent(_Event):
    """The decimal point key was pressed."""

    kind: Literal["decimal"] = "decimal"


class OperatorEvent(_Event):
    """An operator key was pressed."""

    kind: Literal["operator"] = "operator"
    operator: Operator = Field(..., description="Selected binary operator")


class ClearLastEvent(_Event):
    kind: Literal["clear_last"] = "clear_last"


class ClearAllEvent(_Event):
    kind: Literal["clear_all"] = "clear_all"


class ComputeEvent(_Event):
    kind: Literal["compute"] = "compute"


# Discriminated on "kind" so events can also be built from plain dicts
CalculatorEvent = Annotated[
    Union[DigitEvent, DecimalEvent, OperatorEvent, ClearLastEvent, ClearAllEvent, ComputeEvent],
    Field(discriminator="kind"),
]


class CalculatorSnapshot(BaseModel):
    """Read-only view of the calculator state after an event."""

    model_config = ConfigDict(frozen=True)

    first_operand: str = Field(..., description="Text of the first operand")
    second_operand: str = Field(..., description="Text of the second operand")
    operator: Optional[Operator] = Field(default=None, description="Pending operator, if any")
    display: str = Field(..., min_length=1, description="Text currently shown to the user")
