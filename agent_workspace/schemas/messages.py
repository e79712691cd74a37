"""
Shared request/response shapes every provider consumes and produces.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Literal, Optional, Sequence

from pydantic import BaseModel, Field

Role = Literal["user", "assistant"]


class Message(BaseModel):
    """One turn of a conversation."""

    role: Role
    content: str


class Usage(BaseModel):
    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)


class AIResponse(BaseModel):
    """
    Normalized completion result.

    `usage` is always present; backends that report no token counts leave it
    at zero/zero.
    """

    message: str
    usage: Usage = Field(default_factory=Usage)


class AgentResponse(BaseModel):
    """Envelope returned by the assistant facade."""

    message: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    usage: Usage = Field(default_factory=Usage)


def build_conversation(
    prompt: str,
    messages: Optional[Sequence[Message]] = None,
) -> List[Dict[str, str]]:
    """
    Return the wire-level conversation: history (if any) then `prompt` as a
    new user turn. Always a fresh list; `messages` is left untouched.
    """
    conversation = [{"role": m.role, "content": m.content} for m in messages or ()]
    conversation.append({"role": "user", "content": prompt})
    return conversation
