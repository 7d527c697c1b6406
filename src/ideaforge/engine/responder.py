"""Request orchestration: classify, compose, start the answer stream."""

import logging
from typing import Optional, Sequence

from ..config import Settings
from ..llm import CompletionService, OpenAIClient, TextStream, smooth_stream
from ..models import ChatMessage
from .classifier import DomainClassifier
from .composer import compose_fallback_messages, compose_messages

logger = logging.getLogger(__name__)


class UpstreamUnavailableError(Exception):
    """Neither the domain stream nor the fallback stream could be started."""


def _log_generation_error(error: Exception) -> None:
    logger.error(f"[STREAM] Error generating innovation: {type(error).__name__}: {error}")


def _log_fallback_error(error: Exception) -> None:
    logger.error(f"[STREAM] Fallback error: {type(error).__name__}: {error}")


class InnovationResponder:
    """Turns a conversation into a started answer stream.

    Flow per request:
        classify -> compose -> stream (primary)

    Any failure before the primary stream has started switches to a single
    fallback attempt with a generic instruction. Exactly one stream is
    returned. Nothing is kept between requests.
    """

    def __init__(self, settings: Settings, llm: Optional[CompletionService] = None):
        self.settings = settings
        self.llm = llm if llm is not None else OpenAIClient(settings)
        self.classifier = DomainClassifier(self.llm, settings.classifier_model)
        self.transform = smooth_stream(
            delay_ms=settings.smoothing_delay_ms,
            chunking=settings.smoothing_chunking,
        )

    async def respond(self, messages: Sequence[ChatMessage]) -> TextStream:
        """Start streaming an answer to the last message.

        Raises:
            UpstreamUnavailableError: if the fallback stream cannot be started.
        """
        question = messages[-1].content
        model = self.settings.generation_model

        try:
            category = await self.classifier.classify(question)
            final_messages = compose_messages(category, messages, question)
            logger.debug(f"[COMPOSER] Composed {category.value} prompt ({len(final_messages)} messages)")

            stream = await self.llm.stream(
                model,
                final_messages,
                transform=self.transform,
                on_error=_log_generation_error,
            )
            logger.info(f"[RESPONDER] Streaming {category.value} answer")
            return stream
        except Exception as e:
            logger.error(f"[RESPONDER] Innovation engine error: {type(e).__name__}: {e}")

        fallback_messages = compose_fallback_messages(messages, question)
        try:
            stream = await self.llm.stream(
                model,
                fallback_messages,
                transform=self.transform,
                on_error=_log_fallback_error,
            )
        except Exception as e:
            logger.error(f"[RESPONDER] Fallback stream could not start: {type(e).__name__}: {e}")
            raise UpstreamUnavailableError("completion service unavailable") from e

        logger.info("[RESPONDER] Streaming fallback answer")
        return stream
