"""Weather insert data models."""

from weather_insert.models.geo import GeocodingResponse, GeoResult
from weather_insert.models.open_meteo import OpenMeteoCurrent, OpenMeteoForecast
from weather_insert.models.settings import DEFAULT_TEMPLATE, Provider, Settings, Units
from weather_insert.models.weather import WeatherRecord
from weather_insert.models.wttr import (
    WttrCurrentCondition,
    WttrNearestArea,
    WttrResponse,
    WttrValue,
)

__all__ = [
    "DEFAULT_TEMPLATE",
    "GeoResult",
    "GeocodingResponse",
    "OpenMeteoCurrent",
    "OpenMeteoForecast",
    "Provider",
    "Settings",
    "Units",
    "WeatherRecord",
    "WttrCurrentCondition",
    "WttrNearestArea",
    "WttrResponse",
    "WttrValue",
]
