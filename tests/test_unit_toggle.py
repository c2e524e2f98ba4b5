"""
Tests for the °C / °F toggle that works on the rendered temperature text.
"""

import pytest

from unit_toggle import (
    TO_CELSIUS_LABEL,
    TO_FAHRENHEIT_LABEL,
    UnitToggle,
    c_to_f,
    f_to_c,
)


class TestConversions:
    """Test the raw conversion formulas."""

    def test_c_to_f(self):
        assert c_to_f(0) == 32
        assert c_to_f(100) == 212
        assert c_to_f(-40) == -40

    def test_f_to_c(self):
        assert f_to_c(32) == 0
        assert f_to_c(212) == 100


class TestUnitToggle:
    """Test toggle() text rewriting and state changes."""

    def test_starts_in_celsius(self):
        toggle = UnitToggle()
        assert toggle.is_celsius is True
        assert toggle.button_label == TO_FAHRENHEIT_LABEL

    def test_celsius_to_fahrenheit(self):
        result = UnitToggle().toggle("Temp: 20°C")

        assert result.text == "Temp: 68.0°F"
        assert result.button_label == TO_CELSIUS_LABEL

    def test_alternates(self):
        toggle = UnitToggle()
        first = toggle.toggle("Temp: 20°C")
        second = toggle.toggle(first.text)

        assert second.text == "Temp: 20.0°C"
        assert second.button_label == TO_FAHRENHEIT_LABEL
        assert toggle.is_celsius is True

    def test_negative_value(self):
        assert UnitToggle().toggle("Temp: -40°C").text == "Temp: -40.0°F"

    def test_uses_first_number(self):
        assert UnitToggle().toggle("Temp: 10.5°C (feels 3)").text == "Temp: 50.9°F"

    @pytest.mark.parametrize("text", ["Temp: —°C", "", None])
    def test_no_number_is_noop(self, text):
        toggle = UnitToggle()

        assert toggle.toggle(text) is None
        assert toggle.is_celsius is True

    @pytest.mark.parametrize("celsius", [-12.3, 0.0, 18.5, 21.37, 36.6, 41.0])
    def test_round_trip_within_tolerance(self, celsius):
        toggle = UnitToggle()
        fahrenheit = toggle.toggle(f"Temp: {celsius}°C")
        back = toggle.toggle(fahrenheit.text)

        value = float(back.text.replace("Temp: ", "").replace("°C", ""))
        assert value == pytest.approx(celsius, abs=0.1)

    def test_ignores_unit_in_text(self):
        # the stored state, not the text's unit, decides the direction
        toggle = UnitToggle()
        assert toggle.toggle("Temp: 68°F").text == "Temp: 154.4°F"
