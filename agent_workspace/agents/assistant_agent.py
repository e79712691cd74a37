from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence, Union

from pydantic import ValidationError

from agent_workspace.core.errors import AgentError, ErrorKind, classify_error
from agent_workspace.providers.base import LLMProvider
from agent_workspace.providers.factory import get_provider
from agent_workspace.schemas.messages import AgentResponse, AIResponse, Message

logger = logging.getLogger(__name__)


class AssistantAgent:
    """
    Caller-facing client bound to a single LLM provider.

    With no arguments the provider is resolved from the environment once, at
    construction. Each ask/chat call makes exactly one provider call.
    """

    def __init__(self, provider: Optional[LLMProvider] = None) -> None:
        if provider is None:
            try:
                provider = get_provider()
            except Exception as exc:
                raise _wrap(exc) from exc
        self._provider = provider

    @property
    def provider(self) -> LLMProvider:
        return self._provider

    @property
    def provider_name(self) -> str:
        return self._provider.get_name()

    async def ask(self, question: str) -> AgentResponse:
        """Send a single question as a one-turn conversation."""
        return await self._complete(question, None)

    async def chat(self, messages: Sequence[Union[Message, Dict[str, Any]]]) -> AgentResponse:
        """
        Continue a conversation. The last turn is the prompt; earlier turns
        are sent as history in their original order.

        Turns may be `Message` instances or plain {"role", "content"} dicts.
        Malformed turns, an empty conversation, or one that does not end with
        a user turn raise AgentError(kind=INVALID_REQUEST) before any request.
        """
        try:
            turns = [Message.model_validate(message) for message in messages]
        except ValidationError as exc:
            raise AgentError(
                f"Agent error: Invalid conversation turn: {exc}",
                ErrorKind.INVALID_REQUEST,
            ) from exc
        if not turns:
            raise AgentError(
                "Agent error: Conversation is empty; nothing to answer.",
                ErrorKind.INVALID_REQUEST,
            )
        *history, last = turns
        if last.role != "user":
            raise AgentError(
                "Agent error: Conversation must end with a user turn.",
                ErrorKind.INVALID_REQUEST,
            )
        return await self._complete(last.content, history)

    async def _complete(
        self,
        prompt: str,
        history: Optional[Sequence[Message]],
    ) -> AgentResponse:
        try:
            result: AIResponse = await self._provider.complete(prompt, history)
        except Exception as exc:
            logger.warning("%s call failed: %s", self.provider_name, exc)
            raise _wrap(exc) from exc
        return AgentResponse(message=result.message, usage=result.usage)

    async def close(self) -> None:
        await self._provider.close()

    async def __aenter__(self) -> "AssistantAgent":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


def _wrap(exc: BaseException) -> AgentError:
    message = str(exc) or exc.__class__.__name__
    return AgentError(f"Agent error: {message}", classify_error(exc))
