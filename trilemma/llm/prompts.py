"""Prompt template for the trade-off analysis."""

from __future__ import annotations

_TRADEOFF_TEMPLATE = """You are an expert project manager and systems thinker.
The user is facing a project triangle constraint (Fast, Good/Accurate, Cheap/Saving) problem in the context of: "{context}".

Please explain:
1. What "Fast" (快), "Accurate" (准), and "Cheap" (省) specifically mean in this context.
2. Why achieving all three simultaneously is impossible or extremely difficult (the "Impossible Triangle").
3. Give concrete examples of what happens when you pick only two (e.g., Fast + Cheap = Low Quality).

Keep the response concise, structured, and insightful. Limit to {word_limit} words.
Use Markdown formatting."""

DEFAULT_WORD_LIMIT = 300


def build_tradeoff_prompt(context: str, word_limit: int = DEFAULT_WORD_LIMIT) -> str:
    return _TRADEOFF_TEMPLATE.format(context=context.strip(), word_limit=word_limit)


def get_prompt_template() -> str:
    return _TRADEOFF_TEMPLATE
