"""Pacing transform for streamed text."""

import asyncio
import re
from typing import AsyncIterator, Literal, Optional

from .streaming import Transform

CHUNK_PATTERNS = {
    "word": re.compile(r"\S+\s+"),
    "line": re.compile(r"\n+"),
}


def smooth_stream(
    delay_ms: Optional[float] = 10,
    chunking: Literal["word", "line"] = "word",
) -> Transform:
    """Create a transform that re-chunks deltas into words or lines.

    Provider deltas arrive in arbitrary fragments. The transform buffers them
    and emits one complete word (or line) at a time, sleeping ``delay_ms``
    between emitted chunks. Whatever is left in the buffer when the source
    ends is emitted as-is.

    Args:
        delay_ms: Pause between chunks in milliseconds. 0 or None disables it.
        chunking: "word" splits after trailing whitespace, "line" after newlines.
    """
    try:
        pattern = CHUNK_PATTERNS[chunking]
    except KeyError:
        raise ValueError(f"Unknown chunking mode: {chunking}") from None

    delay = delay_ms / 1000 if delay_ms else 0

    async def transform(source: AsyncIterator[str]) -> AsyncIterator[str]:
        buffer = ""
        async for delta in source:
            buffer += delta
            while True:
                match = pattern.search(buffer)
                if match is None:
                    break
                chunk = buffer[: match.end()]
                buffer = buffer[match.end():]
                yield chunk
                if delay:
                    await asyncio.sleep(delay)

        if buffer:
            yield buffer

    return transform
