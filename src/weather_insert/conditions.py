"""Weather condition labels and icons."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Condition:
    """Human-readable label and icon for a weather state."""

    label: str
    icon: str


FALLBACK_ICON = "🌡"
UNKNOWN_CONDITION = Condition("Unknown", FALLBACK_ICON)

# WMO weather interpretation codes, as reported by Open-Meteo
WMO_CONDITIONS: MappingProxyType[int, Condition] = MappingProxyType({
    0: Condition("Clear sky", "☀️"),
    1: Condition("Mainly clear", "🌤"),
    2: Condition("Partly cloudy", "⛅"),
    3: Condition("Overcast", "☁️"),
    45: Condition("Fog", "🌫"),
    48: Condition("Depositing rime fog", "🌫"),
    51: Condition("Light drizzle", "🌦"),
    53: Condition("Moderate drizzle", "🌦"),
    55: Condition("Dense drizzle", "🌧"),
    56: Condition("Light freezing drizzle", "🌧"),
    57: Condition("Dense freezing drizzle", "🌧"),
    61: Condition("Slight rain", "🌦"),
    63: Condition("Moderate rain", "🌧"),
    65: Condition("Heavy rain", "🌧"),
    66: Condition("Light freezing rain", "🌧"),
    67: Condition("Heavy freezing rain", "🌧"),
    71: Condition("Slight snow", "🌨"),
    73: Condition("Moderate snow", "🌨"),
    75: Condition("Heavy snow", "❄️"),
    77: Condition("Snow grains", "❄️"),
    80: Condition("Slight rain showers", "🌦"),
    81: Condition("Moderate rain showers", "🌧"),
    82: Condition("Violent rain showers", "🌧"),
    85: Condition("Slight snow showers", "🌨"),
    86: Condition("Heavy snow showers", "❄️"),
    95: Condition("Thunderstorm", "⛈"),
    96: Condition("Thunderstorm with slight hail", "⛈"),
    99: Condition("Thunderstorm with heavy hail", "⛈"),
})

# Checked in order; the first group with a matching keyword wins
_KEYWORD_ICONS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("thunder",), "⛈"),
    (("snow", "blizzard"), "❄️"),
    (("sleet", "freezing"), "🌨"),
    (("heavy rain", "downpour"), "🌧"),
    (("rain", "drizzle"), "🌦"),
    (("fog", "mist"), "🌫"),
    (("overcast",), "☁️"),
    (("partly", "cloudy"), "⛅"),
    (("clear", "sunny"), "☀️"),
)


def code_to_condition(code: int) -> Condition:
    """Map a WMO weather code to its condition. Unknown codes never raise."""
    return WMO_CONDITIONS.get(code, UNKNOWN_CONDITION)


def text_to_icon(text: str) -> str:
    """Pick an icon for a free-text condition description."""
    lower = text.lower()
    for keywords, icon in _KEYWORD_ICONS:
        if any(keyword in lower for keyword in keywords):
            return icon
    return FALLBACK_ICON
