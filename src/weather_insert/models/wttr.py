"""wttr.in ``format=j1`` response models.

wttr.in reports every value as a string and wraps text in
``[{"value": ...}]`` lists.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WttrValue(BaseModel):
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    value: str | None = None


def first_value(values: list[WttrValue]) -> str | None:
    """Return the first wrapped value, or None if the list is empty."""
    return values[0].value if values else None


class WttrCurrentCondition(BaseModel):
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    temp_c: str | None = Field(default=None, alias="temp_C")
    temp_f: str | None = Field(default=None, alias="temp_F")
    feels_like_c: str | None = Field(default=None, alias="FeelsLikeC")
    feels_like_f: str | None = Field(default=None, alias="FeelsLikeF")
    windspeed_kmph: str | None = Field(default=None, alias="windspeedKmph")
    windspeed_miles: str | None = Field(default=None, alias="windspeedMiles")
    humidity: str | None = None
    weather_desc: list[WttrValue] = Field(default_factory=list, alias="weatherDesc")


class WttrNearestArea(BaseModel):
    model_config = ConfigDict(frozen=True)

    area_name: list[WttrValue] = Field(default_factory=list, alias="areaName")
    region: list[WttrValue] = Field(default_factory=list)


class WttrResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_condition: list[WttrCurrentCondition] = Field(default_factory=list)
    nearest_area: list[WttrNearestArea] = Field(default_factory=list)
