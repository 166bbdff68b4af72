"""Weather Insert — Streamlit note editor with weather insertion."""

from __future__ import annotations

import asyncio

import streamlit as st

from weather_insert import (
    Cursor,
    TextDocument,
    WeatherInsertService,
    insert_weather,
    insert_weather_frontmatter,
    preview,
)
from weather_insert._logging import configure_file_logging

from shared import LOG_FILE, load_settings
from shared.sidebar import render_settings_sidebar

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(page_title="Weather Insert", page_icon="⛅", layout="centered")

configure_file_logging(LOG_FILE)

if "settings" not in st.session_state:
    st.session_state["settings"] = load_settings()
if "note" not in st.session_state:
    st.session_state["note"] = ""


def _notify(message: str) -> None:
    if message.startswith("Weather error:"):
        st.error(message)
    else:
        st.toast(message)


# ── Sidebar — settings ───────────────────────────────────────────────────────

settings = render_settings_sidebar(st.session_state["settings"])
st.session_state["settings"] = settings
service = WeatherInsertService(settings)

# ── Note editor ──────────────────────────────────────────────────────────────

st.title("Note")

note = st.text_area("Document", value=st.session_state["note"], height=300)
lines = note.split("\n")
cursor_line = int(st.number_input(
    "Cursor line", min_value=1, max_value=len(lines), value=len(lines), step=1,
))
current_line = lines[cursor_line - 1]
cursor_ch = int(st.number_input(
    "Cursor column",
    min_value=0,
    max_value=len(current_line),
    value=len(current_line),
    step=1,
))

document = TextDocument(note, Cursor(cursor_line - 1, cursor_ch))

col_line, col_frontmatter = st.columns(2)
with col_line:
    if st.button("Insert current weather", use_container_width=True):
        with st.spinner("Fetching weather..."):
            inserted = asyncio.run(insert_weather(document, service, _notify))
        if inserted:
            st.session_state["note"] = document.get_value()
            st.rerun()
with col_frontmatter:
    if st.button("Insert weather into frontmatter", use_container_width=True):
        with st.spinner("Fetching weather..."):
            inserted = asyncio.run(insert_weather_frontmatter(document, service, _notify))
        if inserted:
            st.session_state["note"] = document.get_value()
            st.rerun()

# ── Preview ──────────────────────────────────────────────────────────────────

st.subheader("Preview")
if st.button("Fetch preview"):
    with st.spinner("Fetching..."):
        st.code(asyncio.run(preview(service)), language=None)
