"""Custom exceptions for the weather insert pipeline."""

from __future__ import annotations


class WeatherInsertError(Exception):
    """Base exception for all weather insert errors."""


class ConfigError(WeatherInsertError):
    """Raised when required configuration is missing (e.g. no location)."""


class LocationNotFoundError(WeatherInsertError):
    """Raised when the geocoding service has no match for a place name."""

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(
            f'Location "{location}" not found. '
            'Try a city name like "New York" or "London".'
        )


class WeatherParseError(WeatherInsertError):
    """Raised when a response lacks the expected weather data."""


class WeatherTransportError(WeatherInsertError):
    """Raised when the underlying HTTP request fails."""


class WeatherConnectionError(WeatherTransportError):
    """Raised when the client cannot connect to a weather service."""


class WeatherTimeoutError(WeatherTransportError):
    """Raised when a request to a weather service times out."""


class WeatherAPIError(WeatherTransportError):
    """Raised when a weather service returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")
