"""LangChain ChatAnthropic wrapper — the single ``generate(prompt)`` operation."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from trilemma.config import Settings, settings as default_settings
from trilemma.llm.prompts import build_tradeoff_prompt

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


class TextGenerationError(RuntimeError):
    """Any failure talking to the text-generation service."""


class LLMNotConfiguredError(TextGenerationError):
    pass


def _content_to_text(content: Any) -> str:
    """Flatten an AIMessage content (str or list of content blocks) to plain text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return ""


class AnthropicTextGenerator:
    """Calls Claude through LangChain. Raises ``TextGenerationError`` on any failure."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings

    async def generate(self, prompt: str) -> str:
        if not self.settings.anthropic_api_key:
            raise LLMNotConfiguredError("LLM not configured — set ANTHROPIC_API_KEY in .env")

        from langchain_anthropic import ChatAnthropic
        from langchain_core.messages import HumanMessage

        llm = ChatAnthropic(
            model=self.settings.model_name,
            api_key=self.settings.anthropic_api_key,
            max_tokens=self.settings.max_tokens,
        )

        try:
            response = await llm.ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            raise TextGenerationError(str(e)) from e

        text = _content_to_text(response.content)
        logger.debug("Generated %d chars with %s", len(text), self.settings.model_name)
        return text


async def analyze_tradeoffs(context: str, generator: TextGenerator | None = None) -> str:
    """Build the trade-off prompt for ``context`` and return the raw generated text."""
    generator = generator or AnthropicTextGenerator()
    return await generator.generate(build_tradeoff_prompt(context))
