"""Runtime settings for the calculator state machine."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CalculatorSettings(BaseModel):
    """
    Settings applied to a calculator instance.

    Settings are immutable so a running calculator cannot change its entry
    rules mid-operand.
    """

    model_config = ConfigDict(frozen=True)

    max_operand_length: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum characters accepted per operand while typing, None for unbounded",
    )
