"""Shared constants for the weather insert dashboard."""

from __future__ import annotations

import os

from weather_insert.models.settings import Provider, Units

_DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data")

SETTINGS_FILE = os.path.join(_DATA_DIR, "settings.json")
LOG_FILE = os.path.join(os.path.dirname(__file__), "..", "logs", "api_calls.log")

UNIT_LABELS: dict[Units, str] = {
    Units.IMPERIAL: "Imperial (°F, mph)",
    Units.METRIC: "Metric (°C, km/h)",
}

PROVIDER_LABELS: dict[Provider, str] = {
    Provider.OPEN_METEO: "Open-Meteo (recommended)",
    Provider.WTTR: "wttr.in",
}

TEMPLATE_HELP = (
    "Available tokens: {icon} {temp} {conditions} {wind} {humidity} {feelsLike} {location}"
)
