"""
dashboard_view.py

Pure rendering: shaped forecast data -> view-model records. Nothing in here knows
about widgets; the GUI paints whatever build_view returns.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import List, Optional

from forecast import (
    ShapedForecast,
    entry_condition,
    entry_humidity,
    entry_temperature,
    entry_wind_speed,
)
from weather_config import HEAT_ALERT_C
from weather_icons import resolve_icon

DATE_FORMAT = "%a %b %d %Y"  # Thu Aug 28 2025
DT_TXT_FORMAT = "%Y-%m-%d %H:%M:%S"
MISSING = "—"

# background themes picked from the current condition
THEMES = {
    "sunny": {"bg": "#FEF3C7", "card": "#FFFFFF", "fg": "#1f2937", "accent": "#F59E0B"},
    "cloudy": {"bg": "#E5E7EB", "card": "#FFFFFF", "fg": "#1f2937", "accent": "#6B7280"},
    "rainy": {"bg": "#1E3A5F", "card": "#374151", "fg": "#e6eef8", "accent": "#3A83F1"},
}


@dataclass
class ForecastCard:
    date: str
    icon: str
    description: str
    temperature: str
    wind: str
    humidity: str
    temp_value: Optional[float] = None


@dataclass
class DashboardView:
    city: str
    date: str
    temperature: str
    wind: str
    humidity: str
    description: str
    icon: str
    theme: str
    heat_alert: bool = False
    cards: List[ForecastCard] = field(default_factory=list)

    @property
    def colors(self) -> dict:
        return THEMES[self.theme]


def _show(value) -> str:
    return MISSING if value is None else f"{value}"


def temperature_text(temp) -> str:
    return f"Temp: {_show(temp)}°C"


def wind_text(speed) -> str:
    return f"Wind: {_show(speed)} m/s"


def humidity_text(humidity) -> str:
    return f"Humidity: {_show(humidity)}%"


def pick_theme(condition: str) -> str:
    """Substring match, first hit wins: Rain -> rainy, Cloud -> cloudy, anything else sunny."""
    condition = condition or ""
    if "Rain" in condition:
        return "rainy"
    if "Cloud" in condition:
        return "cloudy"
    return "sunny"


def is_extreme_heat(temp) -> bool:
    return temp is not None and temp > HEAT_ALERT_C


def card_date(dt_txt: Optional[str]) -> str:
    try:
        return datetime.datetime.strptime(dt_txt, DT_TXT_FORMAT).strftime(DATE_FORMAT)
    except (TypeError, ValueError):
        return dt_txt or ""


def build_card(entry: dict) -> ForecastCard:
    condition = entry_condition(entry)
    temp = entry_temperature(entry)
    return ForecastCard(
        date=card_date(entry.get("dt_txt")),
        icon=resolve_icon(condition),
        description=condition,
        temperature=temperature_text(temp),
        wind=wind_text(entry_wind_speed(entry)),
        humidity=humidity_text(entry_humidity(entry)),
        temp_value=temp,
    )


def build_view(shaped: ShapedForecast, today: Optional[datetime.date] = None) -> DashboardView:
    """
    Build the full dashboard view for one forecast.

    `today` defaults to the local date; forecast cards are rebuilt from scratch and
    always show °C.
    """
    today = today or datetime.date.today()
    current = shaped.current
    condition = entry_condition(current)
    temp = entry_temperature(current)

    return DashboardView(
        city=shaped.city,
        date=today.strftime(DATE_FORMAT),
        temperature=temperature_text(temp),
        wind=wind_text(entry_wind_speed(current)),
        humidity=humidity_text(entry_humidity(current)),
        description=condition,
        icon=resolve_icon(condition),
        theme=pick_theme(condition),
        heat_alert=is_extreme_heat(temp),
        cards=[build_card(e) for e in shaped.daily],
    )
