#!/usr/bin/env python3
# ─────────────────────────────────────────────────────────────────────────────
# chartscompo_demo.py
#
# Streamlit demo of the chart widgets: pick a chart type, see its example
# ─────────────────────────────────────────────────────────────────────────────

import logging

import streamlit as st

from app.common.constants import APP_TITLE, LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL
from app.ui import examples, selector, sidebar, theme

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

# ─────────────────────────────────────────────────────────────────────────────
# Main Layout
# ─────────────────────────────────────────────────────────────────────────────

st.set_page_config(page_title=APP_TITLE, layout="centered", page_icon="📊")

theme.apply_theme()

# --- Sidebar ---
style_override, show_data = sidebar.render()

# --- Chart type selector ---
chart_type = selector.render()

# --- Chart card ---
with st.container(border=True):
    examples.render_example(chart_type, style=style_override, show_data=show_data)
