import pytest

from app.core.data import DataPoint, DataSeries, PieChartSegment


@pytest.fixture
def two_series():
    """Two 3-point series over the same labels."""
    labels = ["A", "B", "C"]
    return [
        DataSeries("North", "#2196F3", [DataPoint(i, y, lbl) for i, (y, lbl) in enumerate(zip([4, 6, 2], labels))]),
        DataSeries("South", "#F44336", [DataPoint(i, y, lbl) for i, (y, lbl) in enumerate(zip([1, 3, 5], labels))]),
    ]


@pytest.fixture
def quarter_segments():
    """Four segments of 25 each."""
    return [PieChartSegment(f"Q{i + 1}", 25, "#A8E6CF") for i in range(4)]


@pytest.fixture
def triangle_series():
    """One radar series over 3 categories."""
    return [DataSeries("Tri", "#2979FF", [DataPoint(0, 10), DataPoint(1, 5), DataPoint(2, 0)])]
