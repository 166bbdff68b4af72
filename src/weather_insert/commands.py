"""Editor commands: insert weather at the cursor or into frontmatter.

Both commands leave the document untouched when anything fails; the error is
reported through ``notify`` and logged.
"""

from __future__ import annotations

import logging
from typing import Callable

from weather_insert.editor import Cursor, Editor
from weather_insert.frontmatter import format_frontmatter_lines, merge_frontmatter
from weather_insert.service import WeatherInsertService

logger = logging.getLogger(__name__)

Notify = Callable[[str], None]

FETCHING_NOTICE = "Fetching weather…"
INSERTED_NOTICE = "Weather inserted ✓"
FRONTMATTER_NOTICE = "Weather added to frontmatter ✓"
UNCLOSED_FRONTMATTER_NOTICE = "Frontmatter block is not closed; weather not added"


def error_notice(exc: Exception) -> str:
    return f"Weather error: {exc}"


async def insert_weather(editor: Editor, service: WeatherInsertService, notify: Notify) -> bool:
    """Insert the rendered weather line at the cursor and move past it."""
    notify(FETCHING_NOTICE)
    try:
        line = await service.produce_weather_line()
    except Exception as exc:
        logger.exception("Weather insert failed")
        notify(error_notice(exc))
        return False

    cursor = editor.get_cursor()
    editor.replace_range(line, cursor)
    editor.set_cursor(Cursor(cursor.line, cursor.ch + len(line)))
    notify(INSERTED_NOTICE)
    return True


async def insert_weather_frontmatter(
    editor: Editor,
    service: WeatherInsertService,
    notify: Notify,
    *,
    escape_quotes: bool = False,
) -> bool:
    """Add the weather fields to the document's frontmatter."""
    notify(FETCHING_NOTICE)
    try:
        block = await service.produce_frontmatter_block(escape_quotes=escape_quotes)
    except Exception as exc:
        logger.exception("Weather frontmatter insert failed")
        notify(error_notice(exc))
        return False

    content = editor.get_value()
    merged = merge_frontmatter(content, format_frontmatter_lines(block))
    if merged == content:
        notify(UNCLOSED_FRONTMATTER_NOTICE)
        return False

    editor.set_value(merged)
    notify(FRONTMATTER_NOTICE)
    return True


async def preview(service: WeatherInsertService) -> str:
    """Render the configured line for the settings preview, or the error text."""
    try:
        return await service.produce_weather_line()
    except Exception as exc:
        logger.warning("Weather preview failed: %s", exc)
        return f"Error: {exc}"
