"""Named color palettes, looked up by name and index."""

from __future__ import annotations

from app.core.data import ChartDataError, _check_color


class ColorPalettes:
    Default = (
        "#2196F3", "#F44336", "#4CAF50", "#FF9800",
        "#9C27B0", "#00BCD4", "#FFEB3B", "#795548",
    )
    Pastel = (
        "#A8E6CF", "#FFD3B6", "#FFAAA5", "#D4A5E8",
        "#A5C8FF", "#FDFD96", "#C1E1C1", "#F6C6EA",
    )
    Vibrant = (
        "#FF1744", "#00E676", "#2979FF", "#FFC400",
        "#D500F9", "#00E5FF", "#FF9100", "#76FF03",
    )
    Monochrome = (
        "#1B5E20", "#2E7D32", "#388E3C", "#43A047",
        "#4CAF50", "#66BB6A", "#81C784", "#A5D6A7",
    )
    Earth = (
        "#8D6E63", "#A1887F", "#6D4C41", "#C0A16B",
        "#7E8F4E", "#B5651D", "#556B2F", "#D2B48C",
    )

    _NAMES = ("Default", "Pastel", "Vibrant", "Monochrome", "Earth")

    @classmethod
    def names(cls) -> list[str]:
        return list(cls._NAMES)

    @classmethod
    def get(cls, name: str) -> tuple[str, ...]:
        for candidate in cls._NAMES:
            if candidate.lower() == name.strip().lower():
                return getattr(cls, candidate)
        raise KeyError(f"Unknown palette: {name!r}")


def color_at(palette, index: int) -> str:
    """Palette color for index, cycling past the end."""
    if not palette:
        raise ChartDataError("Palette is empty")
    return palette[index % len(palette)]


def hex_to_rgb(color: str) -> tuple[int, int, int, float]:
    """
    Split a hex color into (r, g, b, alpha).

    Accepts #RRGGBB and the #AARRGGBB form used by the mobile toolkits.
    """
    color = _check_color(color)
    digits = color[1:]
    alpha = 1.0
    if len(digits) == 8:
        alpha = int(digits[:2], 16) / 255
        digits = digits[2:]
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    return r, g, b, alpha


def with_alpha(color: str, alpha: float) -> str:
    """CSS rgba() string for a hex color, its own alpha scaled by `alpha`."""
    r, g, b, own = hex_to_rgb(color)
    a = max(0.0, min(1.0, own * alpha))
    return f"rgba({r}, {g}, {b}, {a:.3g})"
