"""POST /api/layout, GET /api/layout/svg — stateless geometry."""

from __future__ import annotations

from fastapi import APIRouter, Query
from fastapi.responses import Response

from trilemma.engine.layout import compute_layout
from trilemma.engine.overlap import overlap_report
from trilemma.models.requests import LayoutRequest
from trilemma.models.responses import LayoutResponse
from trilemma.svg.render import render_layout_svg

router = APIRouter(prefix="/layout")


@router.post("", response_model=LayoutResponse)
async def layout(req: LayoutRequest) -> LayoutResponse:
    result = compute_layout(req.radius, req.separation, req.rotation)
    overlap = overlap_report(result) if req.include_overlap else None
    return LayoutResponse.from_layout(result, overlap)


@router.get("/svg")
async def layout_svg(
    radius: float = Query(..., gt=0),
    separation: float = Query(..., gt=0),
    rotation: float = Query(0.0),
) -> Response:
    result = compute_layout(radius, separation, rotation)
    return Response(content=render_layout_svg(result), media_type="image/svg+xml")
