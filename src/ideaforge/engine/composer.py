"""Prompt composition for the generation call."""

from typing import Sequence

from ..llm.prompts import FALLBACK_INSTRUCTION, SOLUTION_SCAFFOLD
from ..models import ChatMessage
from ..taxonomy import DomainCategory, guidance_for, template_for


def compose_prompt(category: DomainCategory, question: str) -> str:
    """Build the domain prompt: persona, problem, scaffold, guidance."""
    return (
        f"{template_for(category)}\n"
        "\n"
        f"Problem: {question}\n"
        "\n"
        f"{SOLUTION_SCAFFOLD}\n"
        "\n"
        f"{guidance_for(category)}"
    )


def _replace_last(messages: Sequence[ChatMessage], content: str) -> list[ChatMessage]:
    """Copy of the history minus its last entry, plus a new user message."""
    return [*messages[:-1], ChatMessage(role="user", content=content)]


def compose_messages(
    category: DomainCategory,
    messages: Sequence[ChatMessage],
    question: str,
) -> list[ChatMessage]:
    """Message list for the primary generation call."""
    return _replace_last(messages, compose_prompt(category, question))


def compose_fallback_messages(messages: Sequence[ChatMessage], question: str) -> list[ChatMessage]:
    """Message list for the generic fallback call."""
    return _replace_last(messages, FALLBACK_INSTRUCTION + question)
