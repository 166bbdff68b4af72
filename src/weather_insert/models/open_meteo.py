"""Open-Meteo forecast API response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class OpenMeteoCurrent(BaseModel):
    """Current-instant block of a forecast response."""

    model_config = ConfigDict(frozen=True)

    temperature_2m: float
    relative_humidity_2m: float
    apparent_temperature: float
    weather_code: int
    wind_speed_10m: float


class OpenMeteoForecast(BaseModel):
    model_config = ConfigDict(frozen=True)

    current: OpenMeteoCurrent
