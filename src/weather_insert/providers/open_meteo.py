"""Open-Meteo provider: geocode the place name, then fetch current conditions."""

from __future__ import annotations

from pydantic import ValidationError

from weather_insert._http import AsyncTransport
from weather_insert._logging import log_fetch
from weather_insert.conditions import code_to_condition
from weather_insert.exceptions import WeatherParseError
from weather_insert.geocoding import resolve
from weather_insert.models.open_meteo import OpenMeteoForecast
from weather_insert.models.settings import Units
from weather_insert.models.weather import WeatherRecord

from .base import TEMP_SYMBOLS, WIND_LABELS, WeatherProvider, format_number, round_half_up

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "weather_code",
    "wind_speed_10m",
)

_TEMPERATURE_UNITS = {Units.METRIC: "celsius", Units.IMPERIAL: "fahrenheit"}
_WIND_SPEED_UNITS = {Units.METRIC: "kmh", Units.IMPERIAL: "mph"}


class OpenMeteoProvider(WeatherProvider):
    """Coordinate-based provider backed by api.open-meteo.com (no API key)."""

    @log_fetch
    async def fetch(self, location: str, units: Units) -> WeatherRecord:
        async with AsyncTransport() as transport:
            geo = await resolve(location, transport=transport)
            data = await transport.get(
                FORECAST_URL,
                params={
                    "latitude": geo.latitude,
                    "longitude": geo.longitude,
                    "current": ",".join(CURRENT_FIELDS),
                    "temperature_unit": _TEMPERATURE_UNITS[units],
                    "wind_speed_unit": _WIND_SPEED_UNITS[units],
                    "forecast_days": 1,
                },
            )

        try:
            current = OpenMeteoForecast.model_validate(data).current
        except ValidationError as exc:
            raise WeatherParseError(
                f"Could not parse weather data from Open-Meteo: {exc}"
            ) from exc

        condition = code_to_condition(current.weather_code)
        temp_symbol = TEMP_SYMBOLS[units]
        return WeatherRecord(
            temp=f"{round_half_up(current.temperature_2m)}{temp_symbol}",
            conditions=condition.label,
            icon=condition.icon,
            wind=f"{round_half_up(current.wind_speed_10m)} {WIND_LABELS[units]}",
            humidity=f"{format_number(current.relative_humidity_2m)}%",
            feels_like=f"{round_half_up(current.apparent_temperature)}{temp_symbol}",
            location=geo.label,
        )
