"""Pydantic schemas for the chat API."""

from typing import Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """A single turn of the conversation."""

    role: Literal["user", "assistant", "system"]
    content: str

    def to_openai(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


class ChatRequest(BaseModel):
    """Body of POST /api/chat."""

    messages: list[ChatMessage] = Field(min_length=1)
