import streamlit as st

from app.common.constants import APP_TITLE, Colors

_CSS = f"""
<style>
.stApp {{
    background-color: {Colors.BACKGROUND};
}}
.cc-top-bar {{
    background-color: {Colors.PRIMARY_GREEN};
    color: {Colors.WHITE};
    font-weight: 700;
    font-size: 1.35rem;
    padding: 0.9rem 1.25rem;
    border-radius: 0 0 12px 12px;
    margin-bottom: 0.5rem;
}}
.cc-chart-header {{
    color: {Colors.DARK_GREEN};
    font-size: 20px;
    font-weight: 700;
    text-align: center;
    padding: 16px 0;
}}
div[data-testid="stVerticalBlockBorderWrapper"] {{
    background-color: {Colors.SURFACE};
    border-radius: 16px;
    box-shadow: 0 2px 6px rgba(27, 94, 32, 0.15);
}}
.stButton > button {{
    border-radius: 12px;
    height: 44px;
    font-weight: 500;
}}
.stButton > button[kind="secondary"] {{
    background-color: {Colors.WHITE};
    color: {Colors.PRIMARY_GREEN};
    border: 1px solid {Colors.SURFACE_VARIANT};
}}
</style>
"""


def apply_theme():
    """Green theme on top of .streamlit/config.toml, plus the top bar."""
    st.markdown(_CSS, unsafe_allow_html=True)
    st.markdown(f'<div class="cc-top-bar">{APP_TITLE}</div>', unsafe_allow_html=True)


def chart_title_header(title: str):
    st.markdown(f'<div class="cc-chart-header">{title}</div>', unsafe_allow_html=True)
