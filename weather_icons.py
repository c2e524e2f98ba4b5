"""Map OpenWeather condition keywords ("main" values) to the local icon files."""

import os
from typing import Optional

from weather_config import ICONS_DIR

CUSTOM_ICONS = {
    "Clear": "sun.png",
    "Clouds": "clouds.png",
    "Rain": "rainy-day.png",
    "Snow": "snow.png",
    "Thunderstorm": "thunder.png",
    "Mist": "haze.png",
}
DEFAULT_ICON = "dry.png"


def resolve_icon(condition: Optional[str], icons_dir: str = ICONS_DIR) -> str:
    # exact, case-sensitive match
    return os.path.join(icons_dir, CUSTOM_ICONS.get(condition, DEFAULT_ICON))
