"""Analysis lifecycle — Idle / Loading / Success / Error.

States are immutable snapshots; each transition function takes the current
snapshot and returns the next one.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

EMPTY_RESULT_FALLBACK = "No analysis generated."
GENERIC_ERROR_MESSAGE = "Could not generate analysis. Please ensure API Key is valid."


class AnalysisStatus(str, enum.Enum):
    IDLE = "IDLE"
    LOADING = "LOADING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class AnalysisInProgressError(RuntimeError):
    """A request is already in flight; submissions are refused until it resolves."""


class InvalidTransitionError(RuntimeError):
    pass


@dataclass(frozen=True)
class AnalysisState:
    context_text: str = ""
    status: AnalysisStatus = AnalysisStatus.IDLE
    result_text: str = ""

    @property
    def is_loading(self) -> bool:
        return self.status is AnalysisStatus.LOADING

    @property
    def result_format(self) -> str:
        """How a client should display ``result_text``."""
        if self.status is AnalysisStatus.SUCCESS:
            return "markdown"
        if self.status is AnalysisStatus.ERROR:
            return "text"
        return "none"


def can_submit(state: AnalysisState, context_text: str | None = None) -> bool:
    """Guard for the submit control: nothing in flight and some context to send."""
    text = state.context_text if context_text is None else context_text
    return not state.is_loading and bool(text.strip())


def submit(state: AnalysisState, context_text: str) -> AnalysisState:
    """Idle/Success/Error -> Loading. Blank context leaves the state untouched."""
    if state.is_loading:
        raise AnalysisInProgressError("An analysis request is already running")
    if not context_text.strip():
        return state
    return AnalysisState(context_text=context_text, status=AnalysisStatus.LOADING, result_text="")


def resolve_success(state: AnalysisState, text: str | None) -> AnalysisState:
    if not state.is_loading:
        raise InvalidTransitionError(f"Cannot resolve from {state.status.value}")
    return replace(state, status=AnalysisStatus.SUCCESS, result_text=text or EMPTY_RESULT_FALLBACK)


def resolve_failure(state: AnalysisState) -> AnalysisState:
    if not state.is_loading:
        raise InvalidTransitionError(f"Cannot resolve from {state.status.value}")
    return replace(state, status=AnalysisStatus.ERROR, result_text=GENERIC_ERROR_MESSAGE)
