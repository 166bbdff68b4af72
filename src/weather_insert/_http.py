"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from weather_insert.exceptions import (
    WeatherAPIError,
    WeatherConnectionError,
    WeatherParseError,
    WeatherTimeoutError,
    WeatherTransportError,
)


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON."""
    if response.status_code >= 400:
        raise WeatherAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        return response.json()
    except ValueError as exc:
        raise WeatherParseError(f"Invalid JSON from {response.url.host}: {exc}") from exc


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient.

    One transport is opened per fetch and closed when the fetch completes,
    so nothing is pooled between invocations:

        async with AsyncTransport() as transport:
            data = await transport.get(url, params)
    """

    def __init__(self) -> None:
        self._client = httpx.AsyncClient(headers={"Accept": "application/json"})

    async def __aenter__(self) -> AsyncTransport:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def get(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(url, params=params)
        except httpx.ConnectError as exc:
            raise WeatherConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise WeatherTimeoutError(str(exc)) from exc
        except httpx.HTTPError as exc:
            raise WeatherTransportError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
