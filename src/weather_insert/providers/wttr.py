"""wttr.in provider: one request with the place name in the URL path."""

from __future__ import annotations

from urllib.parse import quote

from pydantic import ValidationError

from weather_insert._http import AsyncTransport
from weather_insert._logging import log_fetch
from weather_insert.conditions import text_to_icon
from weather_insert.exceptions import WeatherParseError
from weather_insert.models.settings import Units
from weather_insert.models.weather import WeatherRecord
from weather_insert.models.wttr import (
    WttrCurrentCondition,
    WttrNearestArea,
    WttrResponse,
    first_value,
)

from .base import TEMP_SYMBOLS, WIND_LABELS, WeatherProvider

WTTR_URL = "https://wttr.in"

_UNIT_FLAGS = {Units.METRIC: "m", Units.IMPERIAL: "u"}
# kept literal in the path segment, like the unreserved marks
_URI_SAFE = "!*'()"


def build_url(location: str, units: Units) -> str:
    """Build the j1 request URL; the unit flag is a bare query key."""
    return f"{WTTR_URL}/{quote(location, safe=_URI_SAFE)}?format=j1&{_UNIT_FLAGS[units]}"


def _require(value: str | None, field: str) -> str:
    if value is None:
        raise WeatherParseError(f"Could not parse weather data from wttr.in: missing {field}")
    return value


def _location_label(area: WttrNearestArea | None, fallback: str) -> str:
    if area is None:
        return fallback
    name = first_value(area.area_name)
    if name is None:
        name = fallback
    region = first_value(area.region)
    return f"{name}, {region}" if region else name


class WttrProvider(WeatherProvider):
    """Text-based provider backed by wttr.in (no API key)."""

    @log_fetch
    async def fetch(self, location: str, units: Units) -> WeatherRecord:
        units = Units(units)
        async with AsyncTransport() as transport:
            data = await transport.get(build_url(location, units))

        try:
            response = WttrResponse.model_validate(data)
        except ValidationError as exc:
            raise WeatherParseError(f"Could not parse weather data from wttr.in: {exc}") from exc
        if not response.current_condition:
            raise WeatherParseError("Could not parse weather data from wttr.in")

        current = response.current_condition[0]
        temp, feels_like, wind = self._unit_fields(current, units)
        conditions = first_value(current.weather_desc)
        if conditions is None:
            conditions = "Unknown"
        area = response.nearest_area[0] if response.nearest_area else None
        temp_symbol = TEMP_SYMBOLS[units]

        return WeatherRecord(
            temp=f"{temp}{temp_symbol}",
            conditions=conditions,
            icon=text_to_icon(conditions),
            wind=f"{wind} {WIND_LABELS[units]}",
            humidity=f"{_require(current.humidity, 'humidity')}%",
            feels_like=f"{feels_like}{temp_symbol}",
            location=_location_label(area, location),
        )

    @staticmethod
    def _unit_fields(current: WttrCurrentCondition, units: Units) -> tuple[str, str, str]:
        """Select temperature, feels-like and wind speed for the unit system."""
        if units is Units.METRIC:
            return (
                _require(current.temp_c, "temp_C"),
                _require(current.feels_like_c, "FeelsLikeC"),
                _require(current.windspeed_kmph, "windspeedKmph"),
            )
        return (
            _require(current.temp_f, "temp_F"),
            _require(current.feels_like_f, "FeelsLikeF"),
            _require(current.windspeed_miles, "windspeedMiles"),
        )
