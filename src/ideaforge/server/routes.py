"""Chat API routes."""

import asyncio
import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse

from .. import __version__
from ..config import Settings
from ..engine import InnovationResponder, UpstreamUnavailableError
from ..models import ChatRequest
from .datastream import DATA_STREAM_HEADERS, DATA_STREAM_MEDIA_TYPE, encode_data_stream

logger = logging.getLogger(__name__)


def create_router(settings: Settings, responder: InnovationResponder) -> APIRouter:
    """Create the chat API router."""
    router = APIRouter()

    @router.get("/api/health")
    async def health():
        """Health check."""
        return {"status": "ok", "version": __version__}

    @router.post("/api/chat")
    async def chat(req: ChatRequest):
        """Answer the last message as a streamed innovation proposal."""
        logger.info(f"[SERVER] Chat request with {len(req.messages)} message(s)")

        try:
            stream = await asyncio.wait_for(
                responder.respond(req.messages),
                timeout=settings.max_duration,
            )
        except asyncio.TimeoutError:
            logger.error(f"[SERVER] Request exceeded {settings.max_duration}s before streaming started")
            raise HTTPException(504, "Timed out waiting for the model")
        except UpstreamUnavailableError:
            raise HTTPException(502, "Model service unavailable")

        return StreamingResponse(
            encode_data_stream(stream),
            media_type=DATA_STREAM_MEDIA_TYPE,
            headers=DATA_STREAM_HEADERS,
        )

    return router
