import logging

import streamlit as st

from app.common.constants import DEFAULT_CHART_TYPE, ChartType, SessionKeys

logger = logging.getLogger(__name__)


def selected_chart_type() -> ChartType:
    """Current selection, initialised to the default on first run."""
    if SessionKeys.SELECTED_CHART_TYPE not in st.session_state:
        st.session_state[SessionKeys.SELECTED_CHART_TYPE] = DEFAULT_CHART_TYPE.name
    return ChartType[st.session_state[SessionKeys.SELECTED_CHART_TYPE]]


def _select(chart_type: ChartType):
    logger.info(f"Chart type selected: {chart_type.name}")
    st.session_state[SessionKeys.SELECTED_CHART_TYPE] = chart_type.name


def render() -> ChartType:
    """Row of mutually exclusive chart-type buttons; returns the active one."""
    current = selected_chart_type()
    cols = st.columns(len(ChartType))
    for col, chart_type in zip(cols, ChartType):
        with col:
            st.button(
                chart_type.display_name,
                key=f"chart_type_{chart_type.name}",
                type="primary" if chart_type == current else "secondary",
                on_click=_select,
                args=(chart_type,),
            )
    return selected_chart_type()
