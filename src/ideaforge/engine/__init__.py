"""Two-stage prompt pipeline: classify, compose, stream."""

from .classifier import DomainClassifier
from .composer import compose_fallback_messages, compose_messages, compose_prompt
from .responder import InnovationResponder, UpstreamUnavailableError

__all__ = [
    "DomainClassifier",
    "InnovationResponder",
    "UpstreamUnavailableError",
    "compose_fallback_messages",
    "compose_messages",
    "compose_prompt",
]
