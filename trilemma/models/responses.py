"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from trilemma.engine.analysis import AnalysisState
from trilemma.engine.layout import Layout
from trilemma.engine.overlap import OverlapReport


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    llm_configured: bool = False


class CircleOut(BaseModel):
    id: str
    label: str
    description: str
    caption: str
    color: str
    x: float
    y: float
    radius: float


class PairwiseLabelOut(BaseModel):
    pair: tuple[str, str]
    text: str
    description: str
    x: float
    y: float


class PairOverlapOut(BaseModel):
    pair: tuple[str, str]
    overlaps: bool
    area: float


class OverlapOut(BaseModel):
    pairs: list[PairOverlapOut] = Field(default_factory=list)
    triple_area: float = 0.0


class LayoutResponse(BaseModel):
    radius: float
    separation: float
    rotation: float
    center_distance: float
    ratio: float
    void_threshold: float
    intersection: str
    status_label: str
    centroid: tuple[float, float]
    circles: list[CircleOut]
    pairwise_labels: list[PairwiseLabelOut]
    overlap: OverlapOut | None = None

    @classmethod
    def from_layout(cls, layout: Layout, overlap: OverlapReport | None = None) -> LayoutResponse:
        status_label = (
            "STATUS: UTOPIA (Center Overlap)"
            if layout.has_common_overlap
            else "STATUS: IMPOSSIBLE (Center Void)"
        )
        overlap_out = None
        if overlap is not None:
            overlap_out = OverlapOut(
                pairs=[
                    PairOverlapOut(
                        pair=(p.pair[0].value, p.pair[1].value),
                        overlaps=p.overlaps,
                        area=p.area,
                    )
                    for p in overlap.pairs
                ],
                triple_area=overlap.triple_area,
            )
        return cls(
            radius=layout.params.radius,
            separation=layout.params.separation,
            rotation=layout.rotation_display,
            center_distance=layout.center_distance,
            ratio=layout.ratio,
            void_threshold=layout.void_threshold,
            intersection=layout.intersection.value,
            status_label=status_label,
            centroid=layout.centroid,
            circles=[
                CircleOut(
                    id=c.identity.value,
                    label=c.label,
                    description=c.description,
                    caption=c.caption,
                    color=c.color,
                    x=c.center[0],
                    y=c.center[1],
                    radius=c.radius,
                )
                for c in layout.circles
            ],
            pairwise_labels=[
                PairwiseLabelOut(
                    pair=(p.pair[0].value, p.pair[1].value),
                    text=p.text,
                    description=p.description,
                    x=p.position[0],
                    y=p.position[1],
                )
                for p in layout.pairwise_labels
            ],
            overlap=overlap_out,
        )


class AnalysisResponse(BaseModel):
    status: str
    context: str = ""
    result: str = ""
    result_format: str = "none"
    can_submit: bool = False

    @classmethod
    def from_state(cls, state: AnalysisState, can_submit: bool) -> AnalysisResponse:
        return cls(
            status=state.status.value,
            context=state.context_text,
            result=state.result_text,
            result_format=state.result_format,
            can_submit=can_submit,
        )


class SessionResponse(BaseModel):
    layout: LayoutResponse
    analysis: AnalysisResponse
