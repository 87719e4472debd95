from __future__ import annotations

import json
import logging

from fastapi import APIRouter, HTTPException

from api.schemas import (
    ChartExampleResponse, ChartTypeInfo, ChartTypeList,
    HistogramBinModel, HistogramRequest, HistogramResponse,
    PieGeometryRequest, PieGeometryResponse, SegmentGeometryModel,
)
from app.common.constants import ChartType
from app.core.calculations import compute_bins, pie_geometry
from app.core.data import ChartDataError, PieChartSegment
from app.core.themes import ChartThemes
from app.ui.examples import EXAMPLES

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/charts", tags=["charts"])


def _unprocessable(e: ChartDataError) -> HTTPException:
    logger.warning(f"Rejected chart data: {e}")
    return HTTPException(status_code=422, detail=str(e))


@router.get("", response_model=ChartTypeList)
def list_chart_types() -> ChartTypeList:
    """Chart types in selector order."""
    return ChartTypeList(chart_types=[
        ChartTypeInfo(name=ct.name, display_name=ct.display_name) for ct in ChartType
    ])


@router.get("/{chart_type}", response_model=ChartExampleResponse)
def get_chart_example(chart_type: str, theme: str | None = None) -> ChartExampleResponse:
    """Figure JSON of one demo example, optionally restyled with a named theme."""
    try:
        ct = ChartType.from_name(chart_type)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0]))

    style = None
    if theme:
        try:
            style = ChartThemes.get(theme)
        except KeyError as e:
            raise HTTPException(status_code=404, detail=str(e.args[0]))

    example = EXAMPLES[ct]
    try:
        fig = example.build(style)
    except ChartDataError as e:
        raise _unprocessable(e)

    return ChartExampleResponse(
        chart_type=ct.name,
        display_name=ct.display_name,
        header=example.header,
        title=example.title,
        theme=style.name if style else None,
        figure=json.loads(fig.to_json()),
    )


@router.post("/histogram/bins", response_model=HistogramResponse)
def bin_values(req: HistogramRequest) -> HistogramResponse:
    """Equal-width binning of arbitrary values."""
    try:
        bins = compute_bins(req.values, req.bin_count)
    except ChartDataError as e:
        raise _unprocessable(e)
    return HistogramResponse(
        bin_count=len(bins),
        total=sum(b.count for b in bins),
        bins=[HistogramBinModel(start=b.start, end=b.end, count=b.count) for b in bins],
    )


@router.post("/pie/geometry", response_model=PieGeometryResponse)
def segment_geometry(req: PieGeometryRequest) -> PieGeometryResponse:
    """Angles, percentages and label anchors of pie segments."""
    try:
        segments = [PieChartSegment(label=s.label, value=s.value, color=s.color) for s in req.segments]
        geometry = pie_geometry(
            segments,
            start_angle=req.start_angle,
            donut=req.donut,
            selected=req.selected,
        )
    except ChartDataError as e:
        raise _unprocessable(e)

    return PieGeometryResponse(
        total=sum(g.value for g in geometry),
        segments=[
            SegmentGeometryModel(
                label=g.label,
                value=g.value,
                color=g.color,
                percentage=g.percentage,
                start_angle=g.start_angle,
                sweep=g.sweep,
                mid_angle=g.mid_angle,
                inner_radius=g.inner_radius,
                outer_radius=g.outer_radius,
                offset=g.offset,
                label_anchor=g.label_anchor,
            )
            for g in geometry
        ],
    )
