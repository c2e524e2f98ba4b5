#!/usr/bin/env python3
"""
weather_fetcher.py

Helpers for the OpenWeather 5-day / 3-hour forecast endpoint:
 - fetch_forecast_by_city(city) -> dict
 - fetch_forecast_by_coords(lat, lon) -> dict
 - detect_coords_via_ip() -> Optional[tuple[float, float]]

Responses are returned as the provider's raw JSON; shaping happens in forecast.py.
Every failure is raised as a WeatherError subclass carrying a message that can be
shown to the user as-is.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import requests

import weather_config as config
from log_util import app_logger

logger = app_logger(__name__)

CITY_NOT_FOUND = "City not found"
LOCATION_NOT_AVAILABLE = "Location weather not available"
CITY_FETCH_FAILED = "Error fetching weather"
LOCATION_FETCH_FAILED = "Error fetching location weather"

IP_LOCATION_ENDPOINTS = [
    "http://ip-api.com/json/",
    "https://ipinfo.io/json",
    "https://ipapi.co/json/",
]


class WeatherError(RuntimeError):
    """Base for every error the dashboard reports to the user."""


class ConfigurationError(WeatherError):
    pass


class InputError(WeatherError):
    pass


class LookupFailedError(WeatherError):
    """The provider answered with a non-success status (unknown city, bad key...)."""


class NetworkError(WeatherError):
    pass


class InvalidDataError(WeatherError):
    pass


class LocationUnavailableError(WeatherError):
    pass


# Internal helper
def _raise_if_no_key():
    if not config.API_KEY:
        raise ConfigurationError(
            "OPENWEATHER_API_KEY is not set. Create a .env file with:\n"
            "OPENWEATHER_API_KEY=your_api_key_here"
        )


def _error_message(resp: requests.Response, default: str) -> str:
    """Pull the provider's `message` out of an error body, if there is one."""
    try:
        body = resp.json()
    except ValueError:
        return default
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return default


def _get_json(params: dict, not_found: str, network_failed: str) -> Dict:
    """Single GET against the forecast endpoint, mapped onto WeatherError subclasses."""
    _raise_if_no_key()
    url = f"{config.BASE}/forecast"
    query = dict(params, appid=config.API_KEY, units=config.UNITS)
    logger.debug(f"GET {url} {params}")

    try:
        resp = requests.get(url, params=query, timeout=config.REQUEST_TIMEOUT)
    except requests.RequestException as e:
        logger.warning(f"Forecast request failed: {e}")
        raise NetworkError(network_failed) from e

    if not resp.ok:
        message = _error_message(resp, not_found)
        logger.warning(f"Forecast lookup failed ({resp.status_code}): {message}")
        raise LookupFailedError(message)

    try:
        return resp.json()
    except ValueError as e:
        raise InvalidDataError("Invalid JSON response from server") from e


def fetch_forecast_by_city(city: str) -> Dict:
    """
    Fetch the 5-day / 3-hour forecast for `city`. Returns the provider JSON:

    {
      "city": {"name": "Paris", ...},
      "list": [
        {"dt_txt": "2025-08-28 12:00:00",
         "main": {"temp": 21.4, "humidity": 60, ...},
         "wind": {"speed": 3.1, ...},
         "weather": [{"main": "Clouds", ...}]},
        ...
      ]
    }

    Raises LookupFailedError, NetworkError or InvalidDataError.
    """
    return _get_json({"q": city}, CITY_NOT_FOUND, CITY_FETCH_FAILED)


def fetch_forecast_by_coords(lat: float, lon: float) -> Dict:
    """Same as fetch_forecast_by_city, addressed by latitude/longitude."""
    return _get_json({"lat": lat, "lon": lon}, LOCATION_NOT_AVAILABLE, LOCATION_FETCH_FAILED)


def _coords_from(payload: Dict) -> Optional[Tuple[float, float]]:
    # providers vary: ip-api uses lat/lon, ipapi.co latitude/longitude, ipinfo "loc"
    if "lat" in payload and "lon" in payload:
        lat, lon = payload["lat"], payload["lon"]
    elif "latitude" in payload and "longitude" in payload:
        lat, lon = payload["latitude"], payload["longitude"]
    elif isinstance(payload.get("loc"), str) and "," in payload["loc"]:
        lat, lon = payload["loc"].split(",", 1)
    else:
        return None
    try:
        return float(lat), float(lon)
    except (TypeError, ValueError):
        return None


def detect_coords_via_ip() -> Optional[Tuple[float, float]]:
    """
    Try several free IP->location providers; return the first (lat, lon) pair or None.
    """
    for url in IP_LOCATION_ENDPOINTS:
        try:
            r = requests.get(url, timeout=6)
            r.raise_for_status()
            payload = r.json()
        except (requests.RequestException, ValueError) as e:
            logger.debug(f"IP location provider {url} failed: {e}")
            continue
        coords = _coords_from(payload) if isinstance(payload, dict) else None
        if coords:
            logger.info(f"Detected location {coords} via {url}")
            return coords
    return None
