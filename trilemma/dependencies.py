"""FastAPI dependency injection."""

from __future__ import annotations

from trilemma.config import settings
from trilemma.engine.shell import InteractionShell
from trilemma.llm.client import AnthropicTextGenerator

# One shell per process; there is a single user
_shell: InteractionShell | None = None


def get_settings():
    return settings


def get_shell() -> InteractionShell:
    global _shell
    if _shell is None:
        _shell = InteractionShell(
            generator=AnthropicTextGenerator(settings),
            config=settings.geometry_config(),
        )
    return _shell
