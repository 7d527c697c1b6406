"""Idea Forge - domain-aware innovation chat backend."""

__version__ = "0.1.0"
