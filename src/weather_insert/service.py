"""Orchestration: configuration -> provider -> rendered output."""

from __future__ import annotations

from typing import Callable

from weather_insert.exceptions import ConfigError
from weather_insert.frontmatter import frontmatter_block
from weather_insert.models.settings import Provider, Settings
from weather_insert.models.weather import WeatherRecord
from weather_insert.providers import WeatherProvider, get_provider
from weather_insert.template import render_with_settings


class WeatherInsertService:
    """Produces weather output for the editing surface from a settings snapshot.

    Usage:
        service = WeatherInsertService(Settings(location="London"))
        line = await service.produce_weather_line()
    """

    def __init__(
        self,
        settings: Settings,
        provider_factory: Callable[[Provider], WeatherProvider] = get_provider,
    ) -> None:
        self.settings = settings
        self._provider_factory = provider_factory

    async def fetch_weather(self) -> WeatherRecord:
        """Fetch current conditions from the configured provider.

        Raises:
            ConfigError: No location is configured; nothing is requested.
        """
        if not self.settings.location:
            raise ConfigError(
                "No location set. Open the weather insert settings to configure your location."
            )
        provider = self._provider_factory(self.settings.provider)
        return await provider.fetch(self.settings.location, self.settings.units)

    async def produce_weather_line(self) -> str:
        """Fetch and render the configured template."""
        record = await self.fetch_weather()
        return render_with_settings(record, self.settings)

    async def produce_frontmatter_block(self, *, escape_quotes: bool = False) -> dict[str, str]:
        """Fetch and build the six quoted frontmatter values."""
        record = await self.fetch_weather()
        return frontmatter_block(record, escape_quotes=escape_quotes)
