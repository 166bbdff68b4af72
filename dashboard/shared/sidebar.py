"""Settings form rendered in the sidebar."""

from __future__ import annotations

import streamlit as st

from weather_insert.models.settings import DEFAULT_TEMPLATE, Provider, Settings, Units

from .constants import PROVIDER_LABELS, TEMPLATE_HELP, UNIT_LABELS
from .settings_store import save_settings


def render_settings_sidebar(current: Settings) -> Settings:
    """Render the settings form and persist any change.

    Returns the settings as edited in this run.
    """
    st.sidebar.title("Weather Insert")

    location = st.sidebar.text_input(
        "Location",
        value=current.location,
        placeholder="New York",
        help='City name (e.g. "New York", "London", "Tokyo"). Used for geocoding.',
    )

    unit_options = list(Units)
    units = st.sidebar.selectbox(
        "Units",
        unit_options,
        index=unit_options.index(current.units),
        format_func=UNIT_LABELS.__getitem__,
        help="Temperature and wind speed units.",
    )

    provider_options = list(Provider)
    provider = st.sidebar.selectbox(
        "Weather source",
        provider_options,
        index=provider_options.index(current.provider),
        format_func=PROVIDER_LABELS.__getitem__,
        help="Open-Meteo is more reliable. wttr.in is a fallback option.",
    )

    template = st.sidebar.text_area(
        "Format template",
        value=current.template,
        placeholder=DEFAULT_TEMPLATE,
        help=TEMPLATE_HELP,
    )

    show_wind = st.sidebar.toggle("Show wind", value=current.show_wind)
    show_humidity = st.sidebar.toggle("Show humidity", value=current.show_humidity)

    edited = Settings(
        location=location,
        units=units,
        provider=provider,
        template=template,
        show_wind=show_wind,
        show_humidity=show_humidity,
    )
    if edited != current:
        save_settings(edited)
    return edited
