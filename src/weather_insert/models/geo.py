"""Geocoding models (Open-Meteo geocoding API)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GeoResult(BaseModel):
    """Best geocoding match for a place name."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    name: str
    country: str | None = None
    admin1: str | None = None

    @property
    def label(self) -> str:
        """Display label: "name, region" if a region is known, else "name, country"."""
        if self.admin1:
            return f"{self.name}, {self.admin1}"
        if self.country:
            return f"{self.name}, {self.country}"
        return self.name


class GeocodingResponse(BaseModel):
    """Search response; ``results`` is omitted entirely when nothing matched."""

    results: list[GeoResult] | None = None
