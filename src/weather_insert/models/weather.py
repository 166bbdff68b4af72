"""Normalized weather record."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class WeatherRecord(BaseModel):
    """Provider-agnostic current conditions, ready for template substitution.

    Every field is a display string with its unit already embedded
    (``"18°C"``, ``"12 km/h"``, ``"62%"``).
    """

    model_config = ConfigDict(frozen=True)

    temp: str
    conditions: str
    icon: str
    wind: str
    humidity: str
    feels_like: str
    location: str
