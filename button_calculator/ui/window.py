"""Tkinter window rendering the keypad and the display."""
import tkinter as tk
from typing import Dict

from button_calculator.common.logger import logger
from button_calculator.core.calculator import CalculatorStateMachine
from button_calculator.ui.keypad import (
    CLEAR_ALL_LABEL,
    CLEAR_LAST_LABEL,
    COMPUTE_LABEL,
    KEYPAD_ROWS,
    OPERATOR_GLYPHS,
    event_for_label,
)


BACKGROUND = "#000000"
DIGIT_COLOR = "#1e3a8a"
OPERATOR_COLOR = "#6650a4"
CLEAR_COLOR = "#c62828"

# Keyboard keysyms that map to a keypad label
KEY_BINDINGS: Dict[str, str] = {
    "<Return>": COMPUTE_LABEL,
    "<KP_Enter>": COMPUTE_LABEL,
    "<BackSpace>": CLEAR_LAST_LABEL,
    "<Escape>": CLEAR_ALL_LABEL,
}


class CalculatorWindow:
    """
    Presentation layer for a CalculatorStateMachine.

    The window owns no calculator state: every button press is converted to an
    event, handed to the state machine, and the display is re-read afterwards.
    """

    def __init__(self, root: tk.Tk, calculator: CalculatorStateMachine) -> None:
        self.root = root
        self.calculator = calculator
        self.display_var = tk.StringVar(value=calculator.display)

        self.root.title("Calculator")
        self.root.configure(bg=BACKGROUND, padx=10, pady=10)
        self._build_display()
        self._build_keypad()
        self._bind_keys()

    def _build_display(self) -> None:
        label = tk.Label(
            self.root,
            textvariable=self.display_var,
            anchor="e",
            font=("Helvetica", 40),
            bg=BACKGROUND,
            fg="#ffffff",
            padx=16,
            pady=16,
        )
        label.grid(row=0, column=0, columnspan=4, sticky="ew")

    def _button_color(self, label: str) -> str:
        if label in (CLEAR_ALL_LABEL, CLEAR_LAST_LABEL):
            return CLEAR_COLOR
        if label in OPERATOR_GLYPHS.values() or label in (COMPUTE_LABEL, "."):
            return OPERATOR_COLOR
        return DIGIT_COLOR

    def _build_keypad(self) -> None:
        for row_index, row in enumerate(KEYPAD_ROWS, start=1):
            column = 0
            for label in row:
                # "AC" spans two columns like the wide button of the grid
                span = 2 if label == CLEAR_ALL_LABEL else 1
                if label == CLEAR_LAST_LABEL:
                    column = 3
                button = tk.Button(
                    self.root,
                    text=label,
                    font=("Helvetica", 20, "bold"),
                    bg=self._button_color(label),
                    fg="#ffffff",
                    width=4,
                    height=2,
                    command=lambda value=label: self.press(value),
                )
                button.grid(row=row_index, column=column, columnspan=span, sticky="nsew", padx=4, pady=4)
                column += span

    def _bind_keys(self) -> None:
        for sequence, label in KEY_BINDINGS.items():
            self.root.bind(sequence, lambda _e, value=label: self.press(value))
        self.root.bind("<Key>", self._on_key)

    def _on_key(self, event: tk.Event) -> None:
        char = event.char
        if not char or char in ("\r", "\x08", "\x1b"):
            return
        try:
            self.press(char)
        except ValueError:
            # Keys without a keypad button are ignored
            logger.debug(f"⌨️ Ignored key {char!r}")

    def press(self, label: str) -> None:
        """
        Forward a button label to the calculator and refresh the display.

        :param str label: Keypad label
        :raises ValueError: If the label is not on the keypad
        """
        self.calculator.handle(event_for_label(label))
        self.display_var.set(self.calculator.display)


def run_window(calculator: CalculatorStateMachine) -> None:
    """Open the calculator window and block until it is closed."""
    root = tk.Tk()
    CalculatorWindow(root, calculator)
    logger.info("🪟 Calculator window opened")
    root.mainloop()
