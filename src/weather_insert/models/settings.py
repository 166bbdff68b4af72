"""User configuration read by the weather pipeline."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_TEMPLATE = "{icon} {temp}, {conditions} | Wind: {wind}"


class Units(str, Enum):
    """Supported unit systems."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class Provider(str, Enum):
    """Supported weather sources."""

    WTTR = "wttr"
    OPEN_METEO = "openmeteo"


class Settings(BaseModel):
    """Weather insert settings. Owned and persisted by the host app."""

    model_config = ConfigDict(frozen=True)

    location: str = ""
    units: Units = Units.IMPERIAL
    provider: Provider = Provider.OPEN_METEO
    template: str = DEFAULT_TEMPLATE
    show_wind: bool = True
    show_humidity: bool = False

    @field_validator("location")
    @classmethod
    def _strip_location(cls, value: str) -> str:
        return value.strip()
