"""Shared fixtures: forecast payloads shaped like the OpenWeather /forecast response."""

import pytest


def make_entry(dt_txt, temp=20.0, condition="Clear", wind=3.0, humidity=50):
    return {
        "dt_txt": dt_txt,
        "main": {"temp": temp, "humidity": humidity},
        "wind": {"speed": wind},
        "weather": [{"main": condition}],
    }


def make_response(city="Paris", entries=None):
    if entries is None:
        entries = [
            make_entry("2025-08-28 09:00:00", temp=18.5, condition="Clouds"),
            make_entry("2025-08-28 12:00:00", temp=22.0, condition="Clear"),
            make_entry("2025-08-28 15:00:00", temp=23.1, condition="Clear"),
            make_entry("2025-08-29 12:00:00", temp=19.4, condition="Rain"),
            make_entry("2025-08-30 00:00:00", temp=12.0, condition="Mist"),
            make_entry("2025-08-30 12:00:00", temp=25.0, condition="Tornado"),
        ]
    return {"cod": "200", "city": {"name": city}, "list": entries}


@pytest.fixture
def forecast_response():
    return make_response()
