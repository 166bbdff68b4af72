"""weather_insert — current weather rendered into notes through a text template."""

from weather_insert.commands import insert_weather, insert_weather_frontmatter, preview
from weather_insert.conditions import Condition, code_to_condition, text_to_icon
from weather_insert.editor import Cursor, Editor, TextDocument
from weather_insert.exceptions import (
    ConfigError,
    LocationNotFoundError,
    WeatherAPIError,
    WeatherConnectionError,
    WeatherInsertError,
    WeatherParseError,
    WeatherTimeoutError,
    WeatherTransportError,
)
from weather_insert.frontmatter import format_frontmatter_lines, frontmatter_block, merge_frontmatter
from weather_insert.geocoding import resolve
from weather_insert.models import GeoResult, Provider, Settings, Units, WeatherRecord
from weather_insert.providers import OpenMeteoProvider, WeatherProvider, WttrProvider, get_provider
from weather_insert.service import WeatherInsertService
from weather_insert.template import render, render_with_settings

__all__ = [
    "Condition",
    "ConfigError",
    "Cursor",
    "Editor",
    "GeoResult",
    "LocationNotFoundError",
    "OpenMeteoProvider",
    "Provider",
    "Settings",
    "TextDocument",
    "Units",
    "WeatherAPIError",
    "WeatherConnectionError",
    "WeatherInsertError",
    "WeatherInsertService",
    "WeatherParseError",
    "WeatherProvider",
    "WeatherRecord",
    "WeatherTimeoutError",
    "WeatherTransportError",
    "WttrProvider",
    "code_to_condition",
    "format_frontmatter_lines",
    "frontmatter_block",
    "get_provider",
    "insert_weather",
    "insert_weather_frontmatter",
    "merge_frontmatter",
    "preview",
    "render",
    "render_with_settings",
    "resolve",
    "text_to_icon",
]

__version__ = "0.1.0"
