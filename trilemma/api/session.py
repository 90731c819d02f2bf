"""/api/session/* — the live interaction shell (sliders + analysis)."""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response, StreamingResponse

from trilemma.dependencies import get_shell
from trilemma.engine.analysis import AnalysisInProgressError, AnalysisStatus
from trilemma.engine.shell import InteractionShell
from trilemma.models.requests import AnalysisRequest, GeometryUpdateRequest
from trilemma.models.responses import AnalysisResponse, LayoutResponse, SessionResponse
from trilemma.svg.render import render_layout_svg

router = APIRouter(prefix="/session")


def _analysis_out(shell: InteractionShell) -> AnalysisResponse:
    return AnalysisResponse.from_state(shell.analysis, shell.can_submit)


def _submit(shell: InteractionShell, context: str) -> None:
    try:
        shell.submit_analysis(context)
    except AnalysisInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    if not shell.analysis.is_loading:
        # Blank context: nothing dispatched, keep what was typed
        shell.set_context(context)


@router.get("", response_model=SessionResponse)
async def session(shell: InteractionShell = Depends(get_shell)) -> SessionResponse:
    return SessionResponse(
        layout=LayoutResponse.from_layout(shell.layout),
        analysis=_analysis_out(shell),
    )


@router.patch("/geometry", response_model=LayoutResponse)
async def update_geometry(
    req: GeometryUpdateRequest,
    shell: InteractionShell = Depends(get_shell),
) -> LayoutResponse:
    layout = shell.update_geometry(
        radius=req.radius,
        separation=req.separation,
        rotation=req.rotation,
    )
    return LayoutResponse.from_layout(layout)


@router.post("/geometry/reset", response_model=LayoutResponse)
async def reset_geometry(shell: InteractionShell = Depends(get_shell)) -> LayoutResponse:
    return LayoutResponse.from_layout(shell.reset_geometry())


@router.get("/svg")
async def session_svg(shell: InteractionShell = Depends(get_shell)) -> Response:
    svg = render_layout_svg(shell.layout, shell.config.canvas_width, shell.config.canvas_height)
    return Response(content=svg, media_type="image/svg+xml")


@router.put("/context", response_model=AnalysisResponse)
async def set_context(
    req: AnalysisRequest,
    shell: InteractionShell = Depends(get_shell),
) -> AnalysisResponse:
    shell.set_context(req.context)
    return _analysis_out(shell)


@router.get("/analysis", response_model=AnalysisResponse)
async def get_analysis(shell: InteractionShell = Depends(get_shell)) -> AnalysisResponse:
    return _analysis_out(shell)


@router.post("/analysis", response_model=AnalysisResponse)
async def submit_analysis(
    req: AnalysisRequest,
    wait: bool = Query(False, description="Hold the response until the analysis resolves"),
    shell: InteractionShell = Depends(get_shell),
) -> AnalysisResponse:
    _submit(shell, req.context)
    if wait:
        await shell.wait_for_analysis()
    return _analysis_out(shell)


async def _stream_analysis(
    shell: InteractionShell,
    submitted: AnalysisResponse,
) -> AsyncGenerator[str, None]:
    """Yield the snapshot taken at submit time, then the resolved one, as SSE events."""
    yield f"event: status\ndata: {json.dumps(submitted.model_dump())}\n\n"

    if submitted.status == AnalysisStatus.LOADING.value:
        await shell.wait_for_analysis()
        data = _analysis_out(shell).model_dump()
        yield f"event: result\ndata: {json.dumps(data)}\n\n"

    yield f"event: done\ndata: {json.dumps({'type': 'done'})}\n\n"


@router.post("/analysis/stream")
async def submit_analysis_stream(
    req: AnalysisRequest,
    shell: InteractionShell = Depends(get_shell),
) -> StreamingResponse:
    _submit(shell, req.context)
    return StreamingResponse(
        _stream_analysis(shell, _analysis_out(shell)),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
