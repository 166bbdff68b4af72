"""Weather fields for YAML-style frontmatter."""

from __future__ import annotations

import logging

from weather_insert.models.weather import WeatherRecord

logger = logging.getLogger(__name__)

DELIMITER = "---"

FRONTMATTER_FIELDS: tuple[tuple[str, str], ...] = (
    ("weather_temp", "temp"),
    ("weather_conditions", "conditions"),
    ("weather_icon", "icon"),
    ("weather_wind", "wind"),
    ("weather_humidity", "humidity"),
    ("weather_location", "location"),
)


def _quote(value: str, escape_quotes: bool) -> str:
    if escape_quotes:
        value = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{value}"'


def frontmatter_block(record: WeatherRecord, *, escape_quotes: bool = False) -> dict[str, str]:
    """Build the six weather keys, in order, with double-quoted values.

    Values are quoted verbatim unless ``escape_quotes`` is set, so a value
    containing ``"`` yields invalid YAML in the default mode.
    """
    return {
        key: _quote(getattr(record, field), escape_quotes)
        for key, field in FRONTMATTER_FIELDS
    }


def format_frontmatter_lines(block: dict[str, str]) -> str:
    """Join a block into ``key: value`` lines."""
    return "\n".join(f"{key}: {value}" for key, value in block.items())


def merge_frontmatter(content: str, lines: str) -> str:
    """Add ``lines`` to the document's frontmatter, creating it if needed.

    Existing frontmatter gets the lines just before its closing delimiter.
    A document that opens a block without closing it is returned unchanged.
    """
    if not content.startswith(DELIMITER):
        return f"{DELIMITER}\n{lines}\n{DELIMITER}\n\n{content}"

    closing = content.find(DELIMITER, len(DELIMITER))
    if closing == -1:
        logger.warning("Frontmatter block is not closed; leaving document unchanged")
        return content
    return content[:closing] + lines + "\n" + content[closing:]
