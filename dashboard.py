"""
dashboard.py

The dashboard controller: one object built at startup that owns the recent-location
store, the unit toggle and the display surface. User actions are methods.

The lookup_* methods do network + shaping work only and return a FetchResult, so they
can run off the UI thread. apply() and toggle_unit() touch the surface and belong on
the UI thread. How an error or the heat alert reaches the user is up to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from dashboard_view import DashboardView, build_view
from forecast import shape_forecast
from log_util import app_logger
from recent_locations import RecentLocationStore
from unit_toggle import ToggleResult, UnitToggle
from weather_fetcher import (
    InputError,
    InvalidDataError,
    LocationUnavailableError,
    WeatherError,
    detect_coords_via_ip,
    fetch_forecast_by_city,
    fetch_forecast_by_coords,
)

logger = app_logger(__name__)

LOCATION_DENIED = "Location access denied"
LOCATION_UNDETECTED = "Could not detect your location."
EMPTY_CITY = "Enter a valid city name!"
INVALID_DATA = "Invalid weather data"


@dataclass
class FetchResult:
    view: Optional[DashboardView] = None
    record_as: Optional[str] = None
    error: Optional[WeatherError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DisplaySurface:
    """What the controller needs from a display. The tkinter window is one implementation."""

    def render(self, view: DashboardView) -> None:
        raise NotImplementedError

    def set_recent_options(self, options: List[Tuple[str, str]]) -> None:
        raise NotImplementedError

    def get_temperature_text(self) -> str:
        raise NotImplementedError

    def set_temperature_text(self, text: str, toggle_label: str) -> None:
        raise NotImplementedError


class DashboardController:
    def __init__(
        self,
        surface: DisplaySurface,
        store: RecentLocationStore,
        toggle: Optional[UnitToggle] = None,
        fetch_by_name: Callable[[str], Dict] = fetch_forecast_by_city,
        fetch_by_coords: Callable[[float, float], Dict] = fetch_forecast_by_coords,
        locate: Callable[[], Optional[Tuple[float, float]]] = detect_coords_via_ip,
    ):
        self.surface = surface
        self.store = store
        self.toggle = toggle or UnitToggle()
        self.fetch_by_name = fetch_by_name
        self.fetch_by_coords = fetch_by_coords
        self.locate = locate

    def start(self) -> None:
        self.surface.set_recent_options(self.store.options())

    # ---------- lookups (no UI work) ----------
    def _build(self, fetch: Callable[[], Dict], record_as: Optional[str]) -> FetchResult:
        try:
            data = fetch()
            view = build_view(shape_forecast(data))
        except WeatherError as e:
            return FetchResult(error=e)
        except (AttributeError, TypeError, KeyError, IndexError) as e:
            # entries that pass the presence checks but have the wrong shape
            logger.warning(f"Malformed forecast entry: {e}")
            return FetchResult(error=InvalidDataError(INVALID_DATA))
        if record_as is None:
            record_as = data["city"].get("name")
        return FetchResult(view=view, record_as=record_as)

    def lookup_city(self, name: Optional[str]) -> FetchResult:
        city = (name or "").strip()
        if not city:
            return FetchResult(error=InputError(EMPTY_CITY))
        logger.info(f"Looking up forecast for {city!r}")
        return self._build(lambda: self.fetch_by_name(city), record_as=city)

    def lookup_recent(self, value: Optional[str]) -> Optional[FetchResult]:
        if not value:
            return None
        return self.lookup_city(value)

    def lookup_current_location(self, allowed: bool = True) -> FetchResult:
        if not allowed:
            return FetchResult(error=LocationUnavailableError(LOCATION_DENIED))
        coords = self.locate()
        if not coords:
            return FetchResult(error=LocationUnavailableError(LOCATION_UNDETECTED))
        lat, lon = coords
        logger.info(f"Looking up forecast for coordinates {lat}, {lon}")
        return self._build(lambda: self.fetch_by_coords(lat, lon), record_as=None)

    # ---------- UI-thread actions ----------
    def apply(self, result: FetchResult) -> FetchResult:
        """Render a successful result and remember its location. Failed results change nothing."""
        if not result.ok:
            logger.warning(f"Lookup failed: {result.error}")
            return result
        self.surface.render(result.view)
        if self.store.record(result.record_as):
            self.surface.set_recent_options(self.store.options())
        return result

    def toggle_unit(self) -> Optional[ToggleResult]:
        toggled = self.toggle.toggle(self.surface.get_temperature_text())
        if toggled:
            self.surface.set_temperature_text(toggled.text, toggled.button_label)
        return toggled
