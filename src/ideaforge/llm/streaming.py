"""Text stream wrapper around a started chat completion stream."""

import logging
from typing import Any, AsyncIterator, Callable, Optional

logger = logging.getLogger(__name__)

Transform = Callable[[AsyncIterator[str]], AsyncIterator[str]]
ErrorObserver = Callable[[Exception], None]


class TextStream:
    """Async iterator over the text deltas of a completion stream.

    The provider request has already been sent when a TextStream exists;
    iterating it only reads the response. A failure while reading is handed
    to ``on_error`` and ends the iteration early, so the consumer sees a
    truncated stream. Without an observer the failure propagates.

    A stream can be iterated once.
    """

    def __init__(
        self,
        chunks: AsyncIterator[Any],
        transform: Optional[Transform] = None,
        on_error: Optional[ErrorObserver] = None,
    ):
        self._chunks = chunks
        self._transform = transform
        self._on_error = on_error
        self.finish_reason: Optional[str] = None
        self.failed = False
        self.completed = False

    def __aiter__(self) -> AsyncIterator[str]:
        return self._iterate()

    async def _deltas(self) -> AsyncIterator[str]:
        """Pull text out of ChatCompletionChunk objects."""
        async for chunk in self._chunks:
            for choice in chunk.choices:
                if choice.finish_reason:
                    self.finish_reason = choice.finish_reason
                content = choice.delta.content if choice.delta else None
                if content:
                    yield content

    async def _iterate(self) -> AsyncIterator[str]:
        source = self._deltas()
        if self._transform is not None:
            source = self._transform(source)

        try:
            async for text in source:
                yield text
            self.completed = True
        except Exception as e:
            self.failed = True
            if self._on_error is None:
                raise
            self._on_error(e)
        finally:
            await self._close()

    async def _close(self) -> None:
        close = getattr(self._chunks, "close", None)
        if close is None:
            return
        try:
            await close()
        except Exception as e:
            logger.debug(f"[STREAM] Error closing provider stream: {e}")

    async def text(self) -> str:
        """Consume the stream and return the joined text."""
        parts = [part async for part in self]
        return "".join(parts)
