"""
unit_toggle.py

Switches the displayed current temperature between °C and °F by re-reading the
rendered text. Forecast cards stay in °C.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

NUMBER_RE = re.compile(r"-?\d+(\.\d+)?")

TO_CELSIUS_LABEL = "Switch to °C"
TO_FAHRENHEIT_LABEL = "Switch to °F"


def c_to_f(value: float) -> float:
    return value * 9 / 5 + 32


def f_to_c(value: float) -> float:
    return (value - 32) * 5 / 9


@dataclass
class ToggleResult:
    text: str
    button_label: str


class UnitToggle:
    def __init__(self):
        # True: the text on screen is °C and the next toggle converts to °F
        self.is_celsius = True

    @property
    def button_label(self) -> str:
        return TO_FAHRENHEIT_LABEL if self.is_celsius else TO_CELSIUS_LABEL

    def toggle(self, displayed_text: str) -> Optional[ToggleResult]:
        """Convert the first number in `displayed_text`; None (and no state change) if there is none."""
        match = NUMBER_RE.search(displayed_text or "")
        if not match:
            return None
        value = float(match.group(0))

        if self.is_celsius:
            text = f"Temp: {c_to_f(value):.1f}°F"
        else:
            text = f"Temp: {f_to_c(value):.1f}°C"
        self.is_celsius = not self.is_celsius
        return ToggleResult(text=text, button_label=self.button_label)
