"""
recent_locations.py

Recently searched locations, persisted as JSON ({"recentCities": [...]}) so the
list survives restarts. Names are unique and only the newest RECENT_LIMIT are kept.
"""

from __future__ import annotations

import json
import os
from typing import List, Tuple

from log_util import app_logger
from weather_config import RECENT_FILE, RECENT_KEY, RECENT_LIMIT

logger = app_logger(__name__)

PLACEHOLDER = ("", "Select")


class RecentLocationStore:
    def __init__(self, path: str = RECENT_FILE, limit: int = RECENT_LIMIT):
        self.path = path
        self.limit = limit

    def list(self) -> List[str]:
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                cities = json.load(f).get(RECENT_KEY) or []
        except (OSError, ValueError, AttributeError) as e:
            logger.warning(f"Ignoring unreadable recent locations file {self.path}: {e}")
            return []
        if not isinstance(cities, list):
            logger.warning(f"Ignoring malformed recent locations in {self.path}")
            return []
        return [c for c in cities if isinstance(c, str)]

    def record(self, name: str) -> bool:
        """Append `name` unless it is empty or already stored. Returns True if the list changed."""
        if not name:
            return False
        cities = self.list()
        if name in cities:
            return False

        cities.append(name)
        if len(cities) > self.limit:
            cities = cities[-self.limit:]
        self._save(cities)
        return True

    def options(self) -> List[Tuple[str, str]]:
        """Selector entries as (value, label), starting with the empty placeholder."""
        return [PLACEHOLDER] + [(c, c) for c in self.list()]

    def _save(self, cities: List[str]) -> None:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({RECENT_KEY: cities}, f, indent=2)
        except OSError as e:
            logger.warning(f"Could not save recent locations to {self.path}: {e}")
