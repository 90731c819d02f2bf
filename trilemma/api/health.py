"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from trilemma.config import Settings
from trilemma.dependencies import get_settings
from trilemma.engine.constraints import CONSTRAINT_ORDER, CONSTRAINT_STYLES
from trilemma.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        llm_configured=bool(settings.anthropic_api_key),
    )


@router.get("/constraints")
async def constraints() -> list[dict[str, str]]:
    """The three constraint cards (glyph, name, colour, blurb)."""
    return [
        {
            "id": c.value,
            "label": CONSTRAINT_STYLES[c].label,
            "description": CONSTRAINT_STYLES[c].description,
            "color": CONSTRAINT_STYLES[c].color,
            "summary": CONSTRAINT_STYLES[c].summary,
        }
        for c in CONSTRAINT_ORDER
    ]


@router.get("/prompts")
async def prompts() -> dict[str, str]:
    from trilemma.llm.prompts import get_prompt_template

    return {"tradeoff": get_prompt_template()}
