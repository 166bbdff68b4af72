"""Token substitution for the user's weather line template."""

from __future__ import annotations

import re

from weather_insert.models.settings import Settings
from weather_insert.models.weather import WeatherRecord

# Only these exact phrasings are stripped; the pipe separator is required.
_WIND_SEGMENT = re.compile(r"\s*\|\s*Wind:\s*\S+\s*\S*")
_HUMIDITY_SEGMENT = re.compile(r"\s*\|\s*Humidity:\s*\S+")


def _tokens(record: WeatherRecord) -> tuple[tuple[str, str], ...]:
    return (
        ("{icon}", record.icon),
        ("{temp}", record.temp),
        ("{conditions}", record.conditions),
        ("{wind}", record.wind),
        ("{humidity}", record.humidity),
        ("{feelsLike}", record.feels_like),
        ("{location}", record.location),
    )


def render(
    record: WeatherRecord,
    template: str,
    *,
    show_wind: bool = True,
    show_humidity: bool = False,
) -> str:
    """Fill ``template`` with the record's fields.

    Every occurrence of each known token is replaced; unknown ``{tokens}`` are
    left as typed. Disabled segments are then removed when the rendered text
    contains the literal ``| Wind: <value> [<unit>]`` or ``| Humidity: <value>``
    phrase.
    """
    result = template
    for token, value in _tokens(record):
        result = result.replace(token, value)

    if not show_wind:
        result = _WIND_SEGMENT.sub("", result)
    if not show_humidity:
        result = _HUMIDITY_SEGMENT.sub("", result)

    return result.strip()


def render_with_settings(record: WeatherRecord, settings: Settings) -> str:
    """Render using the template and segment flags from ``settings``."""
    return render(
        record,
        settings.template,
        show_wind=settings.show_wind,
        show_humidity=settings.show_humidity,
    )
