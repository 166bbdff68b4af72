"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import pytest

from weather_insert.models import WeatherRecord

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
WTTR_URL = "https://wttr.in"


SAMPLE_GEOCODING = {
    "results": [
        {
            "id": 2643743,
            "name": "London",
            "latitude": 51.5,
            "longitude": -0.12,
            "elevation": 25.0,
            "feature_code": "PPLC",
            "country_code": "GB",
            "timezone": "Europe/London",
            "country": "United Kingdom",
            "admin1": "England",
        }
    ],
    "generationtime_ms": 0.9,
}

SAMPLE_GEOCODING_NO_REGION = {
    "results": [
        {
            "name": "Monaco",
            "latitude": 43.73,
            "longitude": 7.42,
            "country": "Monaco",
        }
    ],
}

SAMPLE_FORECAST = {
    "latitude": 51.5,
    "longitude": -0.12,
    "current_units": {"temperature_2m": "°C", "wind_speed_10m": "km/h"},
    "current": {
        "time": "2024-06-01T12:00",
        "interval": 900,
        "temperature_2m": 18.4,
        "relative_humidity_2m": 62,
        "apparent_temperature": 17.9,
        "weather_code": 2,
        "wind_speed_10m": 11.7,
    },
}

SAMPLE_WTTR = {
    "current_condition": [
        {
            "FeelsLikeC": "16",
            "FeelsLikeF": "61",
            "humidity": "72",
            "temp_C": "17",
            "temp_F": "63",
            "weatherDesc": [{"value": "Light rain shower"}],
            "windspeedKmph": "15",
            "windspeedMiles": "9",
        }
    ],
    "nearest_area": [
        {
            "areaName": [{"value": "Paris"}],
            "country": [{"value": "France"}],
            "region": [{"value": "Ile-de-France"}],
        }
    ],
}

SAMPLE_RECORD = {
    "temp": "18°C",
    "conditions": "Partly cloudy",
    "icon": "⛅",
    "wind": "12 km/h",
    "humidity": "62%",
    "feels_like": "18°C",
    "location": "London, England",
}


@pytest.fixture
def record() -> WeatherRecord:
    return WeatherRecord(**SAMPLE_RECORD)
