"""Chat turn schema shared by the memory store and the chat capability."""

from enum import Enum

from pydantic import BaseModel, Field


class ChatRole(str, Enum):
    """Author of a chat turn."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ChatTurn(BaseModel):
    """A single immutable turn of a conversation.

    Sequences of turns are ordered by insertion; the order is the
    conversation order.
    """

    role: ChatRole = Field(..., description="Who produced the turn")
    content: str = Field(..., description="Turn text")

    model_config = {"frozen": True}

    def to_message(self) -> dict[str, str]:
        """Render as the ``{"role", "content"}`` mapping chat APIs expect."""
        return {"role": self.role.value, "content": self.content}
