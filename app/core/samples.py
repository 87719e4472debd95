"""Static sample data shown by the demo examples."""

from app.core.data import DataPoint, DataSeries, PieChartSegment
from app.core.palettes import ColorPalettes

MONTHS = ["Jan", "Fév", "Mar", "Avr", "Mai", "Jun"]


def _series(name, color, values, labels):
    return DataSeries(
        name=name,
        color=color,
        points=[DataPoint(x=float(i), y=v, label=lbl) for i, (v, lbl) in enumerate(zip(values, labels))],
    )


def create_sales_data() -> list[DataSeries]:
    return [
        _series("Ventes 2024", ColorPalettes.Default[0], [10, 15, 8, 12, 20, 18], MONTHS),
        _series("Ventes 2023", ColorPalettes.Default[1], [8, 12, 10, 9, 15, 16], MONTHS),
    ]


def product_segments() -> list[PieChartSegment]:
    shares = [("Produit A", 35), ("Produit B", 25), ("Produit C", 20), ("Produit D", 15), ("Produit E", 5)]
    return [
        PieChartSegment(label=label, value=value, color=ColorPalettes.Pastel[i])
        for i, (label, value) in enumerate(shares)
    ]


def customer_ages() -> list[float]:
    return [
        22, 23, 24, 25, 26, 27, 27, 28, 28, 29,
        30, 30, 30, 31, 31, 32, 32, 33, 34, 35,
        35, 36, 37, 38, 39, 40, 41, 42, 43, 45,
        46, 48, 50, 52, 55, 58, 60, 62, 65,
    ]


def radar_categories() -> list[str]:
    return ["Vitesse", "Puissance", "Autonomie", "Confort", "Prix", "Design"]


def vehicle_comparison() -> list[DataSeries]:
    categories = radar_categories()
    return [
        _series("Modèle X", ColorPalettes.Vibrant[0], [80, 90, 70, 85, 60, 95], categories),
        _series("Modèle Y", ColorPalettes.Vibrant[1], [70, 65, 90, 75, 80, 85], categories),
    ]
