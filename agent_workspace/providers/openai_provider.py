from __future__ import annotations

from typing import Any, Dict

from agent_workspace.providers.base import (
    Conversation,
    LLMProvider,
    chat_completion_response,
)
from agent_workspace.schemas.messages import AIResponse

OPENAI_CHAT_COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"


class OpenAIProvider(LLMProvider):
    """
    LLM provider that calls the OpenAI Chat Completions API.

    Supports gpt-4o, gpt-4o-mini and any other chat model id the account can
    use; the model comes from AI_MODEL.
    """

    label = "OpenAI API"

    def _endpoint(self) -> str:
        return OPENAI_CHAT_COMPLETIONS_URL

    def _headers(self) -> Dict[str, str]:
        headers = super()._headers()
        headers["Authorization"] = f"Bearer {self._config.api_key}"
        return headers

    def _build_payload(self, conversation: Conversation) -> Dict[str, Any]:
        return {
            "model": self._config.model,
            "messages": conversation,
            "temperature": self._config.temperature,
            "max_tokens": self._config.max_tokens,
        }

    def _parse_response(self, data: Any) -> AIResponse:
        return chat_completion_response(data)

    def get_name(self) -> str:
        return f"OpenAI ({self._config.model})"
