"""Place name resolution via the Open-Meteo geocoding API."""

from __future__ import annotations

from pydantic import ValidationError

from weather_insert._http import AsyncTransport
from weather_insert._logging import log_fetch
from weather_insert.exceptions import LocationNotFoundError, WeatherParseError
from weather_insert.models.geo import GeocodingResponse, GeoResult

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"


async def _search(transport: AsyncTransport, place: str) -> GeoResult:
    data = await transport.get(
        GEOCODING_URL,
        params={"name": place, "count": 1, "language": "en", "format": "json"},
    )
    try:
        response = GeocodingResponse.model_validate(data)
        if not response.results:
            raise LocationNotFoundError(place)
        return response.results[0]
    except ValidationError as exc:
        raise WeatherParseError(f"Failed to parse geocoding response: {exc}") from exc


@log_fetch
async def resolve(place: str, transport: AsyncTransport | None = None) -> GeoResult:
    """Resolve a free-text place name to its best geocoding match.

    Args:
        place: City name as typed by the user, e.g. ``"London"``.
        transport: Open transport to reuse; a fresh one is opened otherwise.

    Raises:
        LocationNotFoundError: The service returned no match.
        WeatherParseError: The match lacks coordinates or a name.
    """
    if transport is not None:
        return await _search(transport, place)
    async with AsyncTransport() as own_transport:
        return await _search(own_transport, place)
