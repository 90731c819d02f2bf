"""InteractionShell — the single mutable state object behind the UI.

Geometry sub-state: parameters are clamped to the slider ranges and the layout
is recomputed synchronously on every change, so ``shell.layout`` is never stale.

Analysis sub-state: ``submit_analysis`` moves the state machine to LOADING and
dispatches the text-generation call as an asyncio task. The caller gets control
back immediately; geometry updates keep working while the task runs.
"""

from __future__ import annotations

import asyncio
import logging
import math

from trilemma.engine.analysis import (
    AnalysisState,
    AnalysisStatus,
    can_submit,
    resolve_failure,
    resolve_success,
    submit,
)
from trilemma.engine.config import GeometryConfig
from trilemma.engine.layout import (
    GeometryParameters,
    InvalidGeometryError,
    Layout,
    layout_from_params,
)
from trilemma.llm.client import TextGenerator, analyze_tradeoffs
from trilemma.utils.geometry import clamp

logger = logging.getLogger(__name__)


class InteractionShell:
    def __init__(
        self,
        generator: TextGenerator,
        config: GeometryConfig | None = None,
    ) -> None:
        self.generator = generator
        self.config = config or GeometryConfig()
        self._params = GeometryParameters(
            radius=self.config.default_radius,
            separation=self.config.default_separation,
            rotation=self.config.default_rotation,
        )
        self._layout = layout_from_params(self._params, self.config.centroid)
        self._analysis = AnalysisState()
        self._task: asyncio.Task[None] | None = None

    # --- Geometry ---

    @property
    def params(self) -> GeometryParameters:
        return self._params

    @property
    def layout(self) -> Layout:
        return self._layout

    def update_geometry(
        self,
        radius: float | None = None,
        separation: float | None = None,
        rotation: float | None = None,
    ) -> Layout:
        """Apply any subset of slider changes and recompute the layout."""
        cfg = self.config
        current = self._params
        for name, value in (("radius", radius), ("separation", separation), ("rotation", rotation)):
            if value is not None and not math.isfinite(value):
                raise InvalidGeometryError(f"{name} must be finite, got {value!r}")

        if radius is not None:
            radius = clamp(radius, cfg.radius_min, cfg.radius_max)
        if separation is not None:
            separation = clamp(separation, cfg.separation_min, cfg.separation_max)
        if rotation is not None:
            rotation = clamp(rotation, cfg.rotation_min, cfg.rotation_max)

        self._params = GeometryParameters(
            radius=current.radius if radius is None else radius,
            separation=current.separation if separation is None else separation,
            rotation=current.rotation if rotation is None else rotation,
        )
        self._layout = layout_from_params(self._params, cfg.centroid)
        logger.debug(
            "Geometry r=%.1f s=%.1f rot=%.1f -> %s",
            self._params.radius,
            self._params.separation,
            self._params.rotation,
            self._layout.intersection.value,
        )
        return self._layout

    def reset_geometry(self) -> Layout:
        return self.update_geometry(
            radius=self.config.default_radius,
            separation=self.config.default_separation,
            rotation=self.config.default_rotation,
        )

    # --- Analysis ---

    @property
    def analysis(self) -> AnalysisState:
        return self._analysis

    @property
    def can_submit(self) -> bool:
        return can_submit(self._analysis)

    def set_context(self, context_text: str) -> AnalysisState:
        """Edit the context box. Status and result are left alone."""
        self._analysis = AnalysisState(
            context_text=context_text,
            status=self._analysis.status,
            result_text=self._analysis.result_text,
        )
        return self._analysis

    def submit_analysis(self, context_text: str | None = None) -> AnalysisState:
        """Start an analysis for ``context_text`` (or the stored context).

        Must be called from inside a running event loop. Returns the new state:
        LOADING when a request was dispatched, the unchanged state for blank text.
        """
        text = self._analysis.context_text if context_text is None else context_text
        next_state = submit(self._analysis, text)
        if next_state is self._analysis:
            logger.debug("Ignoring submission with empty context")
            return self._analysis

        self._analysis = next_state
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run_analysis(text))
        logger.info("Analysis dispatched (%d chars of context)", len(text))
        return self._analysis

    async def _run_analysis(self, context_text: str) -> None:
        try:
            result = await analyze_tradeoffs(context_text, self.generator)
        except Exception as e:
            logger.warning("Analysis failed: %s", e)
            self._analysis = resolve_failure(self._analysis)
            return
        self._analysis = resolve_success(self._analysis, result)
        logger.info("Analysis complete (%d chars)", len(self._analysis.result_text))

    async def wait_for_analysis(self) -> AnalysisState:
        """Block until the in-flight request (if any) resolves."""
        if self._task is not None:
            await self._task
        return self._analysis

    @property
    def is_settled(self) -> bool:
        return self._analysis.status is not AnalysisStatus.LOADING
