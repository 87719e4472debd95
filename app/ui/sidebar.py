import streamlit as st

from app.common.constants import APP_TITLE, EXAMPLE_THEME, SessionKeys
from app.core.themes import ChartStyle, ChartThemes


def render() -> tuple[ChartStyle | None, bool]:
    """Renders the sidebar and returns (theme override, show data)."""
    with st.sidebar:
        st.title(f"📊 {APP_TITLE}")
        st.markdown("---")

        st.header("Affichage")
        theme_name = st.selectbox(
            "Thème des graphiques",
            [EXAMPLE_THEME] + ChartThemes.names(),
            index=0,
            key=SessionKeys.THEME_OVERRIDE,
        )
        show_data = st.toggle("Afficher les données", value=False, key=SessionKeys.SHOW_DATA)

        st.info("Choisissez un type de graphique au-dessus de la carte.")

    style = None if theme_name == EXAMPLE_THEME else ChartThemes.get(theme_name)
    return style, show_data
