from pydantic import BaseModel, Field
from typing import Optional


class ChartTypeInfo(BaseModel):
    name: str
    display_name: str


class ChartTypeList(BaseModel):
    chart_types: list[ChartTypeInfo]


class ChartExampleResponse(BaseModel):
    """One demo example. `figure` is the Plotly figure JSON (data + layout)."""
    chart_type: str
    display_name: str
    header: str
    title: str
    theme: Optional[str] = None
    figure: dict


# --- Histogram ---

class HistogramRequest(BaseModel):
    values: list[float]
    bin_count: int = 10


class HistogramBinModel(BaseModel):
    start: float
    end: float
    count: int


class HistogramResponse(BaseModel):
    bin_count: int
    total: int
    bins: list[HistogramBinModel]


# --- Pie ---

class PieSegmentModel(BaseModel):
    label: str
    value: float
    color: str = "#2196F3"


class PieGeometryRequest(BaseModel):
    segments: list[PieSegmentModel]
    donut: bool = False
    selected: Optional[int] = None
    start_angle: float = 0.0


class SegmentGeometryModel(BaseModel):
    label: str
    value: float
    color: str
    percentage: float
    start_angle: float
    sweep: float
    mid_angle: float
    inner_radius: float
    outer_radius: float
    offset: tuple[float, float]
    label_anchor: tuple[float, float]


class PieGeometryResponse(BaseModel):
    total: float
    segments: list[SegmentGeometryModel] = Field(default_factory=list)
