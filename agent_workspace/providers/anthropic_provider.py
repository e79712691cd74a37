from __future__ import annotations

from typing import Any, Dict

from agent_workspace.providers.base import (
    Conversation,
    LLMProvider,
    require_text,
    usage_from,
)
from agent_workspace.schemas.messages import AIResponse

ANTHROPIC_MESSAGES_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"

# Sent ahead of every conversation as the `system` field.
SYSTEM_PREAMBLE = (
    "You are a helpful assistant. Provide clear, concise, and accurate responses."
)


class AnthropicProvider(LLMProvider):
    """LLM provider for the Anthropic Messages API (Claude 3 family)."""

    label = "Anthropic API"

    def _endpoint(self) -> str:
        return ANTHROPIC_MESSAGES_URL

    def _headers(self) -> Dict[str, str]:
        headers = super()._headers()
        headers["x-api-key"] = self._config.api_key or ""
        headers["anthropic-version"] = ANTHROPIC_VERSION
        return headers

    def _build_payload(self, conversation: Conversation) -> Dict[str, Any]:
        return {
            "model": self._config.model,
            "max_tokens": self._config.max_tokens,
            "temperature": self._config.temperature,
            "system": SYSTEM_PREAMBLE,
            "messages": conversation,
        }

    def _parse_response(self, data: Any) -> AIResponse:
        text = data["content"][0]["text"]
        return AIResponse(
            message=require_text(text),
            usage=usage_from(data.get("usage"), "input_tokens", "output_tokens"),
        )

    def get_name(self) -> str:
        return f"Anthropic Claude ({self._config.model})"
