from typing import List

from pydantic import BaseModel, Field, constr

from agent_workspace.schemas.messages import Message


class AskRequest(BaseModel):
    question: constr(min_length=1) = Field(
        ...,
        description="Single question sent as a one-turn conversation.",
    )


class ChatRequest(BaseModel):
    messages: List[Message] = Field(
        ...,
        min_length=1,
        description="Ordered conversation; the last turn must be a user turn.",
    )
