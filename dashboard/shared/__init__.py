"""Shared dashboard utilities.

The Streamlit sidebar lives in ``shared.sidebar`` and is imported by the
pages directly, so settings persistence stays importable without Streamlit.
"""

# --- Constants ---
from .constants import LOG_FILE, PROVIDER_LABELS, SETTINGS_FILE, TEMPLATE_HELP, UNIT_LABELS

# --- Settings persistence ---
from .settings_store import load_settings, save_settings

__all__ = [
    "LOG_FILE",
    "PROVIDER_LABELS",
    "SETTINGS_FILE",
    "TEMPLATE_HELP",
    "UNIT_LABELS",
    "load_settings",
    "save_settings",
]
