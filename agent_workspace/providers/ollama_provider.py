from __future__ import annotations

from typing import Any, Dict

from agent_workspace.core.config import PROVIDER_ENDPOINTS, AIProvider
from agent_workspace.providers.base import Conversation, LLMProvider, require_text
from agent_workspace.schemas.messages import AIResponse, Usage


class OllamaProvider(LLMProvider):
    """
    LLM provider that calls a local Ollama HTTP API.

    Unauthenticated. AI_BASE_URL overrides the default
    http://localhost:11434. Ollama's chat endpoint reports no usage we rely
    on, so usage is always zero.
    """

    label = "Ollama"
    requires_api_key = False

    @property
    def base_url(self) -> str:
        base = self._config.base_url or PROVIDER_ENDPOINTS[AIProvider.OLLAMA]
        return base.rstrip("/")

    def _endpoint(self) -> str:
        return f"{self.base_url}/api/chat"

    def _build_payload(self, conversation: Conversation) -> Dict[str, Any]:
        return {
            "model": self._config.model,
            "messages": conversation,
            "stream": False,
            "options": {
                "temperature": self._config.temperature,
                "num_predict": self._config.max_tokens,
            },
        }

    def _parse_response(self, data: Any) -> AIResponse:
        content = data["message"]["content"]
        return AIResponse(message=require_text(content), usage=Usage())

    def get_name(self) -> str:
        return f"Ollama ({self._config.model}) [Local]"
