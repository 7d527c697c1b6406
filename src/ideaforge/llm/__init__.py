"""Completion service client, prompt text and stream handling."""

from .openai import CompletionService, OpenAIClient
from .smoothing import smooth_stream
from .streaming import TextStream

__all__ = ["CompletionService", "OpenAIClient", "TextStream", "smooth_stream"]
