"""OpenAI client for the classification and generation calls."""

import logging
from typing import Optional, Protocol, Sequence

from openai import AsyncOpenAI

from ..config import Settings
from ..models import ChatMessage
from .streaming import ErrorObserver, TextStream, Transform

logger = logging.getLogger(__name__)


class CompletionService(Protocol):
    """The two calls the pipeline makes against a completion provider."""

    async def complete(self, model: str, messages: Sequence[ChatMessage]) -> str:
        ...

    async def stream(
        self,
        model: str,
        messages: Sequence[ChatMessage],
        transform: Optional[Transform] = None,
        on_error: Optional[ErrorObserver] = None,
    ) -> TextStream:
        ...


class OpenAIClient:
    """Chat Completions client.

    Transport-level retries are left to the SDK (``openai_max_retries``);
    this class adds none of its own.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.client = AsyncOpenAI(
            api_key=settings.openai_api_key,
            timeout=settings.openai_timeout,
            max_retries=settings.openai_max_retries,
        )

    async def complete(self, model: str, messages: Sequence[ChatMessage]) -> str:
        """Run a completion and wait for the full text."""
        logger.debug(f"[LLM] Completion request: model={model}, messages={len(messages)}")

        response = await self.client.chat.completions.create(
            model=model,
            messages=[m.to_openai() for m in messages],
        )
        text = response.choices[0].message.content or ""

        preview = text[:100].replace("\n", " ")
        logger.debug(f"[LLM] Completion response ({len(text)} chars): {preview}")
        return text

    async def stream(
        self,
        model: str,
        messages: Sequence[ChatMessage],
        transform: Optional[Transform] = None,
        on_error: Optional[ErrorObserver] = None,
    ) -> TextStream:
        """Start a streaming completion.

        Returns once the provider has accepted the request. Connection and
        API errors raised before that point propagate to the caller.
        """
        logger.debug(f"[LLM] Stream request: model={model}, messages={len(messages)}")

        chunks = await self.client.chat.completions.create(
            model=model,
            messages=[m.to_openai() for m in messages],
            stream=True,
        )
        logger.info(f"[LLM] Stream started with {model}")
        return TextStream(chunks, transform=transform, on_error=on_error)
