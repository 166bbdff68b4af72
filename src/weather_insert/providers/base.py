"""Abstract weather provider."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from weather_insert.models.settings import Units
from weather_insert.models.weather import WeatherRecord

TEMP_SYMBOLS: dict[Units, str] = {Units.METRIC: "°C", Units.IMPERIAL: "°F"}
WIND_LABELS: dict[Units, str] = {Units.METRIC: "km/h", Units.IMPERIAL: "mph"}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def format_number(value: float) -> str:
    """Format a number without a trailing ``.0`` for whole values."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class WeatherProvider(ABC):
    """Source of current conditions for a location."""

    @abstractmethod
    async def fetch(self, location: str, units: Units) -> WeatherRecord: ...
