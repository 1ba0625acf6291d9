"""Test the label-to-display path of CalculatorWindow."""
import pytest

pytest.importorskip("tkinter")

from button_calculator.core.calculator import CalculatorStateMachine  # noqa: E402
from button_calculator.ui.window import CalculatorWindow  # noqa: E402


class FakeStringVar:
    """Mock tkinter StringVar holding the display text."""

    def __init__(self, value: str = ""):
        self.value = value

    def set(self, value: str) -> None:
        self.value = value

    def get(self) -> str:
        return self.value


class FakeKeyEvent:
    """Mock tkinter key event."""

    def __init__(self, char: str):
        self.char = char


@pytest.fixture
def window() -> CalculatorWindow:
    """Window wired to a calculator, without creating Tk widgets."""
    win = CalculatorWindow.__new__(CalculatorWindow)
    win.calculator = CalculatorStateMachine()
    win.display_var = FakeStringVar("0")
    return win


def test_press_updates_display(window: CalculatorWindow) -> None:
    """Each press refreshes the display variable from the calculator."""
    for label in ["6", "×", "2"]:
        window.press(label)
    assert window.display_var.get() == "2"

    window.press("=")
    assert window.display_var.get() == "12"


def test_press_unknown_label(window: CalculatorWindow) -> None:
    """Unknown labels raise and leave the display untouched."""
    window.press("7")
    with pytest.raises(ValueError):
        window.press("%")
    assert window.display_var.get() == "7"


def test_key_aliases(window: CalculatorWindow) -> None:
    """Typed characters go through the keypad aliases."""
    for char in "9x3=":
        window._on_key(FakeKeyEvent(char))
    assert window.display_var.get() == "27"


@pytest.mark.parametrize("char", ["%", "", "\r", "\x1b"])
def test_ignored_keys(window: CalculatorWindow, char: str) -> None:
    """Keys without a keypad button change nothing."""
    window.press("5")
    window._on_key(FakeKeyEvent(char))
    assert window.display_var.get() == "5"
    assert window.calculator.display == "5"
