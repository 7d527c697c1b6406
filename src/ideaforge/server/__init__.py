"""HTTP transport for the chat pipeline."""

from .app import create_app

__all__ = ["create_app"]
