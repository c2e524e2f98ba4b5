"""
forecast.py

Turns a raw forecast response into what the dashboard shows:
the first entry is treated as current conditions, and the entries stamped at
local noon become the daily forecast.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from weather_config import NOON_MARKER
from weather_fetcher import InvalidDataError


@dataclass
class ShapedForecast:
    city: str
    current: Dict
    daily: List[Dict] = field(default_factory=list)


def entry_temperature(entry: Dict) -> Optional[float]:
    return (entry.get("main") or {}).get("temp")


def entry_humidity(entry: Dict):
    return (entry.get("main") or {}).get("humidity")


def entry_wind_speed(entry: Dict):
    return (entry.get("wind") or {}).get("speed")


def entry_condition(entry: Dict) -> str:
    return ((entry.get("weather") or [{}])[0] or {}).get("main", "")


def select_daily_entries(entries: List[Dict]) -> List[Dict]:
    """Keep the entries whose timestamp carries the noon marker, in their original order."""
    return [e for e in entries if NOON_MARKER in (e.get("dt_txt") or "")]


def shape_forecast(data: Dict) -> ShapedForecast:
    """
    Split a forecast response into current conditions and daily entries.

    Raises InvalidDataError when the response has no `city` or no entries.
    """
    if (
        not isinstance(data, dict)
        or not isinstance(data.get("city"), dict)
        or not isinstance(data.get("list"), list)
        or not data["list"]
    ):
        raise InvalidDataError("Invalid weather data")

    entries = data["list"]
    city = data["city"].get("name") or "Unknown"
    return ShapedForecast(city=city, current=entries[0], daily=select_daily_entries(entries))
