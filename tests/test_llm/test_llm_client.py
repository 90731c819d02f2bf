"""Tests for prompt construction and the LLM client (no network calls)."""

from __future__ import annotations

import asyncio

import pytest

from trilemma.config import Settings
from trilemma.llm.client import (
    AnthropicTextGenerator,
    LLMNotConfiguredError,
    TextGenerationError,
    _content_to_text,
    analyze_tradeoffs,
)
from trilemma.llm.prompts import build_tradeoff_prompt


class TestPrompt:
    def test_embeds_context(self):
        prompt = build_tradeoff_prompt("  Renovating a historic house ")
        assert '"Renovating a historic house"' in prompt

    def test_has_three_requirements(self):
        prompt = build_tradeoff_prompt("x")
        assert "1. What" in prompt
        assert "2. Why achieving all three" in prompt
        assert "3. Give concrete examples" in prompt

    def test_word_limit_and_markdown(self):
        prompt = build_tradeoff_prompt("x")
        assert "Limit to 300 words" in prompt
        assert "Markdown" in prompt
        assert "Limit to 150 words" in build_tradeoff_prompt("x", word_limit=150)


class TestContentToText:
    def test_string(self):
        assert _content_to_text("plain") == "plain"

    def test_blocks(self):
        content = [
            {"type": "thinking", "thinking": "hmm"},
            {"type": "text", "text": "Hello "},
            {"type": "text", "text": "world"},
        ]
        assert _content_to_text(content) == "Hello world"

    def test_unknown(self):
        assert _content_to_text(None) == ""


class TestAnthropicTextGenerator:
    def test_missing_key_raises(self):
        gen = AnthropicTextGenerator(Settings(anthropic_api_key=""))
        with pytest.raises(LLMNotConfiguredError):
            asyncio.run(gen.generate("prompt"))

    def test_not_configured_is_generation_error(self):
        assert issubclass(LLMNotConfiguredError, TextGenerationError)


def test_analyze_tradeoffs_uses_generator(fake_generator):
    result = asyncio.run(analyze_tradeoffs("Cooking a gourmet dinner", fake_generator))
    assert result == "Hello"
    assert "Cooking a gourmet dinner" in fake_generator.prompts[0]
