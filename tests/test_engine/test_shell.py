"""Tests for the interaction shell: slider state + async analysis dispatch."""

from __future__ import annotations

import asyncio
import math

import pytest

from trilemma.config import Settings
from trilemma.engine.analysis import (
    EMPTY_RESULT_FALLBACK,
    GENERIC_ERROR_MESSAGE,
    AnalysisInProgressError,
    AnalysisStatus,
)
from trilemma.engine.config import GeometryConfig
from trilemma.engine.layout import IntersectionState, InvalidGeometryError
from trilemma.engine.shell import InteractionShell
from trilemma.llm.client import LLMNotConfiguredError


class TestGeometry:
    def test_defaults_show_void(self, shell):
        assert shell.params.radius == 130
        assert shell.params.separation == 230
        assert shell.params.rotation == 0
        assert shell.layout.intersection is IntersectionState.CENTRAL_VOID

    def test_update_recomputes_layout(self, shell):
        before = shell.layout
        after = shell.update_geometry(separation=150)
        assert after is shell.layout
        assert after is not before
        assert after.params.separation == 150
        assert after.params.radius == 130
        assert after.intersection is IntersectionState.COMMON_OVERLAP

    def test_partial_update_keeps_other_values(self, shell):
        shell.update_geometry(rotation=45)
        shell.update_geometry(radius=100)
        assert shell.params.rotation == 45
        assert shell.params.radius == 100
        assert shell.params.separation == 230

    @pytest.mark.parametrize(
        "kwargs,field,expected",
        [
            ({"radius": 10}, "radius", 80),
            ({"radius": 500}, "radius", 180),
            ({"separation": 0}, "separation", 100),
            ({"separation": 1000}, "separation", 350),
            ({"rotation": -20}, "rotation", 0),
            ({"rotation": 400}, "rotation", 360),
        ],
    )
    def test_values_clamped_to_slider_ranges(self, shell, kwargs, field, expected):
        shell.update_geometry(**kwargs)
        assert getattr(shell.params, field) == expected

    def test_reset(self, shell):
        shell.update_geometry(radius=90, separation=120, rotation=30)
        layout = shell.reset_geometry()
        assert (layout.params.radius, layout.params.separation, layout.params.rotation) == (130, 230, 0)

    def test_custom_config(self, fake_generator):
        cfg = GeometryConfig(canvas_width=400, canvas_height=400, default_radius=100, default_separation=100)
        shell = InteractionShell(fake_generator, cfg)
        assert shell.layout.centroid == (200.0, 200.0)
        assert shell.layout.has_common_overlap

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"radius": math.nan},
            {"separation": math.inf},
            {"rotation": -math.inf},
            {"radius": 120, "rotation": math.nan},
        ],
    )
    def test_non_finite_values_rejected(self, shell, kwargs):
        shell.update_geometry(radius=100, separation=150, rotation=30)
        before = shell.params
        with pytest.raises(InvalidGeometryError):
            shell.update_geometry(**kwargs)
        assert shell.params == before
        assert shell.layout.params == before

    def test_ranges_from_settings(self, fake_generator):
        cfg = Settings(radius_max=150, separation_min=120).geometry_config()
        assert cfg.radius_max == 150
        assert cfg.separation_min == 120
        shell = InteractionShell(fake_generator, cfg)
        shell.update_geometry(radius=170, separation=100)
        assert shell.params.radius == 150
        assert shell.params.separation == 120


class TestAnalysis:
    def test_blank_context_makes_no_call(self, shell, fake_generator):
        async def run():
            state = shell.submit_analysis("   ")
            await shell.wait_for_analysis()
            return state

        state = asyncio.run(run())
        assert state.status is AnalysisStatus.IDLE
        assert shell.analysis.status is AnalysisStatus.IDLE
        assert fake_generator.prompts == []

    def test_success_flow(self, shell, fake_generator):
        async def run():
            first = shell.submit_analysis("Developing a mobile game")
            final = await shell.wait_for_analysis()
            return first, final

        first, final = asyncio.run(run())
        assert first.status is AnalysisStatus.LOADING
        assert first.result_text == ""
        assert final.status is AnalysisStatus.SUCCESS
        assert final.result_text == "Hello"
        assert len(fake_generator.prompts) == 1
        assert "Developing a mobile game" in fake_generator.prompts[0]

    def test_failure_flow(self, failing_generator):
        shell = InteractionShell(failing_generator)

        async def run():
            shell.submit_analysis("Renovating a house")
            return await shell.wait_for_analysis()

        final = asyncio.run(run())
        assert final.status is AnalysisStatus.ERROR
        assert final.result_text == GENERIC_ERROR_MESSAGE
        assert "quota" not in final.result_text

    def test_missing_api_key_is_an_error_state(self):
        class Unconfigured:
            async def generate(self, prompt):
                raise LLMNotConfiguredError("no key")

        shell = InteractionShell(Unconfigured())

        async def run():
            shell.submit_analysis("x")
            return await shell.wait_for_analysis()

        assert asyncio.run(run()).status is AnalysisStatus.ERROR

    def test_empty_reply_uses_fallback(self, fake_generator, shell):
        fake_generator.reply = ""

        async def run():
            shell.submit_analysis("x")
            return await shell.wait_for_analysis()

        assert asyncio.run(run()).result_text == EMPTY_RESULT_FALLBACK

    def test_uses_stored_context(self, shell, fake_generator):
        shell.set_context("Stored context")
        assert shell.can_submit

        async def run():
            shell.submit_analysis()
            return await shell.wait_for_analysis()

        assert asyncio.run(run()).status is AnalysisStatus.SUCCESS
        assert "Stored context" in fake_generator.prompts[0]

    def test_resubmit_after_success(self, shell, fake_generator):
        async def run():
            shell.submit_analysis("first")
            await shell.wait_for_analysis()
            fake_generator.reply = "second answer"
            reloading = shell.submit_analysis("second")
            assert reloading.status is AnalysisStatus.LOADING
            assert reloading.result_text == ""
            return await shell.wait_for_analysis()

        assert asyncio.run(run()).result_text == "second answer"

    def test_resubmit_after_error(self, failing_generator):
        shell = InteractionShell(failing_generator)

        async def run():
            shell.submit_analysis("first")
            await shell.wait_for_analysis()
            failing_generator.error = None
            failing_generator.reply = "recovered"
            shell.submit_analysis("second")
            return await shell.wait_for_analysis()

        final = asyncio.run(run())
        assert final.status is AnalysisStatus.SUCCESS
        assert final.result_text == "recovered"


class TestConcurrency:
    def test_second_submit_rejected_while_loading(self, blocking_generator):
        shell = InteractionShell(blocking_generator)

        async def run():
            blocking_generator.release = asyncio.Event()
            shell.submit_analysis("first")
            assert not shell.can_submit
            with pytest.raises(AnalysisInProgressError):
                shell.submit_analysis("second")
            blocking_generator.release.set()
            return await shell.wait_for_analysis()

        final = asyncio.run(run())
        assert final.status is AnalysisStatus.SUCCESS
        assert blocking_generator.calls == 1

    def test_geometry_stays_live_while_loading(self, blocking_generator):
        shell = InteractionShell(blocking_generator)

        async def run():
            blocking_generator.release = asyncio.Event()
            shell.submit_analysis("context")
            await asyncio.sleep(0)
            assert blocking_generator.calls == 1
            layout = shell.update_geometry(separation=120)
            assert layout.has_common_overlap
            assert shell.analysis.status is AnalysisStatus.LOADING
            blocking_generator.release.set()
            return await shell.wait_for_analysis()

        final = asyncio.run(run())
        assert final.status is AnalysisStatus.SUCCESS
        assert shell.params.separation == 120
