"""
weather_config.py

Settings shared across the weather dashboard. Values come from the environment,
with a .env file loaded first if present. Nothing here raises at import time
when the API key is missing; the fetcher checks it on each request.
"""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

# Load .env (if present)
load_dotenv()


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


API_KEY = os.getenv("OPENWEATHER_API_KEY")
BASE = os.getenv("OPENWEATHER_BASE_URL", "https://api.openweathermap.org/data/2.5").rstrip("/")
UNITS = "metric"

# None means the transport default (requests waits indefinitely)
REQUEST_TIMEOUT = _env_float("WEATHER_REQUEST_TIMEOUT")

RECENT_FILE = os.getenv("WEATHER_RECENT_FILE", "recent_cities.json")
RECENT_KEY = "recentCities"
RECENT_LIMIT = 10

ICONS_DIR = os.getenv("WEATHER_ICONS_DIR", "icons")

NOON_MARKER = "12:00:00"
HEAT_ALERT_C = 40

LOG_LEVEL = os.getenv("WEATHER_LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("WEATHER_LOG_FILE")
