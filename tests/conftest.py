"""Shared test fixtures."""

from __future__ import annotations

import asyncio

import pytest
from fastapi.testclient import TestClient

from trilemma.dependencies import get_shell
from trilemma.engine.shell import InteractionShell
from trilemma.main import app


class FakeGenerator:
    """Records prompts; returns ``reply`` or raises ``error``."""

    def __init__(self, reply: str = "Hello", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


class BlockingGenerator:
    """Parks every call until ``release`` is set. Create ``release`` inside the loop."""

    def __init__(self, reply: str = "done") -> None:
        self.reply = reply
        self.release: asyncio.Event | None = None
        self.calls = 0

    async def generate(self, prompt: str) -> str:
        self.calls += 1
        assert self.release is not None
        await self.release.wait()
        return self.reply


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def failing_generator() -> FakeGenerator:
    return FakeGenerator(error=ConnectionError("quota exceeded"))


@pytest.fixture
def blocking_generator() -> BlockingGenerator:
    return BlockingGenerator()


@pytest.fixture
def shell(fake_generator: FakeGenerator) -> InteractionShell:
    return InteractionShell(generator=fake_generator)


@pytest.fixture
def client(shell: InteractionShell):
    app.dependency_overrides[get_shell] = lambda: shell
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
