"""Chart styles shared by every widget."""

from __future__ import annotations

from dataclasses import dataclass

from app.core.palettes import ColorPalettes


@dataclass(frozen=True)
class ChartStyle:
    name: str
    palette: tuple[str, ...]
    background_color: str = "#FFFFFF"
    plot_background_color: str = "#FFFFFF"
    grid_color: str = "rgba(128, 128, 128, 0.2)"
    text_color: str = "#212121"
    axis_color: str = "#9E9E9E"
    font_family: str = "Roboto, Arial, sans-serif"
    title_size: int = 18
    line_width: float = 2.5
    point_size: int = 8
    show_grid: bool = True
    show_legend: bool = True
    fill_alpha: float = 0.2

    def layout(self) -> dict:
        """Figure-level layout keys common to all chart types."""
        return dict(
            paper_bgcolor=self.background_color,
            plot_bgcolor=self.plot_background_color,
            font=dict(family=self.font_family, color=self.text_color),
            showlegend=self.show_legend,
        )

    def axis(self) -> dict:
        return dict(
            showgrid=self.show_grid,
            gridcolor=self.grid_color,
            linecolor=self.axis_color,
            zeroline=True,
            zerolinecolor=self.axis_color,
        )


class ChartThemes:
    Default = ChartStyle(name="Default", palette=ColorPalettes.Default)
    Colorful = ChartStyle(
        name="Colorful",
        palette=ColorPalettes.Vibrant,
        background_color="#FFFFFF",
        plot_background_color="#FAFAFF",
        grid_color="rgba(41, 121, 255, 0.12)",
        axis_color="#5C6BC0",
        line_width=3,
        point_size=9,
        fill_alpha=0.3,
    )
    Dark = ChartStyle(
        name="Dark",
        palette=ColorPalettes.Vibrant,
        background_color="#121212",
        plot_background_color="#1E1E1E",
        grid_color="rgba(255, 255, 255, 0.1)",
        text_color="#EEEEEE",
        axis_color="#757575",
        fill_alpha=0.25,
    )
    Minimal = ChartStyle(
        name="Minimal",
        palette=ColorPalettes.Monochrome,
        grid_color="rgba(0, 0, 0, 0.05)",
        axis_color="#BDBDBD",
        line_width=1.5,
        point_size=6,
        show_grid=False,
        fill_alpha=0.1,
    )

    _NAMES = ("Default", "Colorful", "Dark", "Minimal")

    @classmethod
    def names(cls) -> list[str]:
        return list(cls._NAMES)

    @classmethod
    def get(cls, name: str) -> ChartStyle:
        for candidate in cls._NAMES:
            if candidate.lower() == name.strip().lower():
                return getattr(cls, candidate)
        raise KeyError(f"Unknown chart theme: {name!r}")
