"""Weather providers, selected by configuration."""

from __future__ import annotations

from weather_insert.models.settings import Provider

from .base import WeatherProvider
from .open_meteo import OpenMeteoProvider
from .wttr import WttrProvider

_PROVIDERS: dict[Provider, type[WeatherProvider]] = {
    Provider.OPEN_METEO: OpenMeteoProvider,
    Provider.WTTR: WttrProvider,
}


def get_provider(provider: Provider) -> WeatherProvider:
    """Return a provider instance for the configured weather source."""
    return _PROVIDERS[Provider(provider)]()


__all__ = ["OpenMeteoProvider", "WeatherProvider", "WttrProvider", "get_provider"]
