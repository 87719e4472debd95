"""Shared magic strings and settings used across the codebase."""

import enum
import os


class ChartType(enum.Enum):
    LINE = "Linéaire"
    BAR = "Barres"
    PIE = "Camembert"
    HISTOGRAM = "Histogramme"
    RADAR = "Radar"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "ChartType":
        """Look up a chart type by enum name, case-insensitive."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise KeyError(f"Unknown chart type: {name!r}") from None


DEFAULT_CHART_TYPE = ChartType.LINE


class Colors:
    PRIMARY_GREEN = "#2E7D32"
    LIGHT_GREEN = "#4CAF50"
    DARK_GREEN = "#1B5E20"
    BACKGROUND = "#F5F9F5"
    SURFACE = "#FFFFFF"
    TEXT = "#212121"
    SURFACE_VARIANT = "#EDF7ED"
    WHITE = "#FFFFFF"


class SessionKeys:
    SELECTED_CHART_TYPE = "selected_chart_type"
    THEME_OVERRIDE = "theme_override"
    SHOW_DATA = "show_data"


APP_TITLE = "ComposeCharts Démo"

# Theme name shown in the sidebar when each example keeps its own style.
EXAMPLE_THEME = "Par défaut de l'exemple"

API_HOST = os.environ.get("CHARTSCOMPO_API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("CHARTSCOMPO_API_PORT", "8000"))
UI_PORT = int(os.environ.get("CHARTSCOMPO_UI_PORT", "8501"))
LOG_LEVEL = os.environ.get("CHARTSCOMPO_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"
