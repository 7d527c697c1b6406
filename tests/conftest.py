"""Shared pytest fixtures for Idea Forge tests."""

from types import SimpleNamespace
from typing import Optional

import pytest

from ideaforge.config import Settings
from ideaforge.llm import TextStream
from ideaforge.models import ChatMessage


def make_chunk(content: Optional[str] = None, finish_reason: Optional[str] = None):
    """Build an object shaped like an OpenAI ChatCompletionChunk."""
    choice = SimpleNamespace(
        delta=SimpleNamespace(content=content),
        finish_reason=finish_reason,
    )
    return SimpleNamespace(choices=[choice])


async def chunk_source(texts: list[str], error: Optional[Exception] = None):
    """Yield chunks for each text, then a finish chunk (or raise ``error``)."""
    for text in texts:
        yield make_chunk(text)
    if error is not None:
        raise error
    yield make_chunk(None, finish_reason="stop")


class StubCompletionService:
    """In-memory completion service that records every call.

    ``classification`` is returned by ``complete`` unless it is an exception,
    in which case it is raised. ``stream_errors`` is consumed one entry per
    ``stream`` call; an exception entry is raised instead of starting a stream.
    """

    def __init__(self, classification="Other", answer=None, stream_errors=None):
        self.classification = classification
        self.answer = answer or ["An ", "innovative ", "answer."]
        self.stream_errors = list(stream_errors or [])
        self.complete_calls: list[tuple[str, list[ChatMessage]]] = []
        self.stream_calls: list[dict] = []

    async def complete(self, model, messages):
        self.complete_calls.append((model, list(messages)))
        if isinstance(self.classification, Exception):
            raise self.classification
        return self.classification

    async def stream(self, model, messages, transform=None, on_error=None):
        self.stream_calls.append(
            {
                "model": model,
                "messages": list(messages),
                "transform": transform,
                "on_error": on_error,
            }
        )
        if self.stream_errors:
            error = self.stream_errors.pop(0)
            if error is not None:
                raise error
        return TextStream(chunk_source(self.answer), transform=transform, on_error=on_error)


@pytest.fixture
def settings(monkeypatch) -> Settings:
    """Settings with test models and no pacing delay."""
    monkeypatch.setenv("OPENAI_API_KEY", "test-api-key")
    return Settings(
        openai_api_key="test-api-key",
        classifier_model="fast-model",
        generation_model="primary-model",
        smoothing_delay_ms=0,
    )


@pytest.fixture
def hospital_messages() -> list[ChatMessage]:
    return [ChatMessage(role="user", content="How can hospitals reduce wait times?")]


@pytest.fixture
def conversation() -> list[ChatMessage]:
    """A multi-turn history ending with a user question."""
    return [
        ChatMessage(role="system", content="You are helpful."),
        ChatMessage(role="user", content="Hi"),
        ChatMessage(role="assistant", content="Hello! What problem are you working on?"),
        ChatMessage(role="user", content="How do we cut food waste in school cafeterias?"),
    ]
