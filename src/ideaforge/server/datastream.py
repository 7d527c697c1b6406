"""Data stream protocol framing.

Each part is one line: a type code, a colon, a JSON value. The chat client
reads text parts (``0``) as answer text and the finish part (``d``) as the
end of a complete message. A stream that ends without a finish part was cut
short.
"""

import json
import logging
from typing import Any, AsyncIterator

from ..llm import TextStream

logger = logging.getLogger(__name__)

TEXT_PART = "0"
FINISH_MESSAGE_PART = "d"

DATA_STREAM_HEADERS = {
    "x-vercel-ai-data-stream": "v1",
    "Cache-Control": "no-cache",
}
DATA_STREAM_MEDIA_TYPE = "text/plain; charset=utf-8"


def format_part(code: str, value: Any) -> str:
    return f"{code}:{json.dumps(value, ensure_ascii=False)}\n"


def parse_part(line: str) -> tuple[str, Any]:
    """Split a data stream line into (code, decoded value)."""
    code, sep, payload = line.rstrip("\n").partition(":")
    if not sep:
        raise ValueError(f"Malformed data stream line: {line[:80]!r}")
    return code, json.loads(payload)


async def encode_data_stream(stream: TextStream) -> AsyncIterator[str]:
    """Frame a text stream as data stream parts."""
    chunks = 0
    async for text in stream:
        chunks += 1
        yield format_part(TEXT_PART, text)

    if stream.completed:
        yield format_part(FINISH_MESSAGE_PART, {"finishReason": stream.finish_reason or "stop"})
        logger.debug(f"[STREAM] Finished after {chunks} chunks")
    else:
        logger.warning(f"[STREAM] Stream truncated after {chunks} chunks")
