"""JSON persistence for the weather insert settings."""

from __future__ import annotations

import json
import logging
import os

from pydantic import ValidationError

from weather_insert.models.settings import Settings

from .constants import SETTINGS_FILE

logger = logging.getLogger(__name__)


def load_settings(path: str | os.PathLike[str] = SETTINGS_FILE) -> Settings:
    """Load saved settings merged over the defaults.

    Unknown keys are ignored. A missing or unreadable file yields the defaults.
    """
    if not os.path.exists(path):
        return Settings()
    try:
        with open(path, encoding="utf-8") as fh:
            saved = json.load(fh)
        merged = {**Settings().model_dump(mode="json"), **saved}
        return Settings.model_validate(merged)
    except (OSError, ValueError, TypeError, ValidationError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return Settings()


def save_settings(settings: Settings, path: str | os.PathLike[str] = SETTINGS_FILE) -> None:
    """Write settings as JSON, creating the parent directory if needed."""
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(settings.model_dump_json(indent=2))
