from __future__ import annotations

from typing import Any, Dict

from agent_workspace.core.config import PROVIDER_ENDPOINTS, AIProvider
from agent_workspace.providers.base import (
    Conversation,
    LLMProvider,
    chat_completion_response,
)
from agent_workspace.schemas.messages import AIResponse

USER_AGENT = "agent-workspace"


class GitHubModelsProvider(LLMProvider):
    """
    LLM provider for the GitHub Models inference API (free tier available).

    Authenticates with a GitHub personal access token passed as AI_API_KEY.
    """

    label = "GitHub Models"

    def _endpoint(self) -> str:
        return f"{PROVIDER_ENDPOINTS[AIProvider.GITHUB_MODELS]}/chat/completions"

    def _headers(self) -> Dict[str, str]:
        headers = super()._headers()
        headers["Authorization"] = f"Bearer {self._config.api_key}"
        headers["User-Agent"] = USER_AGENT
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
        return f"GitHub Models ({self._config.model})"
