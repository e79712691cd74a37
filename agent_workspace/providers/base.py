from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

import httpx

from agent_workspace.core.config import ProviderConfig
from agent_workspace.core.errors import BackendError, ProviderConfigError, ResponseParseError
from agent_workspace.schemas.messages import AIResponse, Message, Usage, build_conversation

logger = logging.getLogger(__name__)

Conversation = List[Dict[str, str]]


class LLMProvider(ABC):
    """
    Interface for chat-completion backends.

    Subclasses describe their wire format (endpoint, headers, body, error and
    success shapes); `complete` owns the single request/response exchange and
    the translation of failures into the shared error types.
    """

    #: Human-readable backend family, used in error messages.
    label: str = "LLM"
    requires_api_key: bool = True

    def __init__(
        self,
        config: ProviderConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._validate_config()
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(config.timeout_seconds, connect=10.0),
        )

    @property
    def config(self) -> ProviderConfig:
        return self._config

    def _validate_config(self) -> None:
        if self.requires_api_key and not self._config.api_key:
            raise ProviderConfigError(
                f"{self.label} requires API_KEY. Set AI_API_KEY environment variable.",
                key="AI_API_KEY",
                provider=self._config.provider,
            )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def complete(
        self,
        prompt: str,
        messages: Optional[Sequence[Message]] = None,
    ) -> AIResponse:
        """
        Send `prompt` (after optional history `messages`) and return the
        normalized response.

        Raises BackendError, ResponseParseError, or the underlying
        httpx.TransportError unchanged.
        """
        conversation = build_conversation(prompt, messages)
        payload = self._build_payload(conversation)

        logger.info(
            "%s request: model=%s turns=%s max_tokens=%s",
            self.label,
            self._config.model,
            len(conversation),
            self._config.max_tokens,
        )
        response = await self._client.post(
            self._endpoint(),
            json=payload,
            headers=self._headers(),
        )
        raw_body = response.text

        try:
            data: Any = json.loads(raw_body)
        except ValueError as exc:
            raise ResponseParseError(
                f"Failed to parse {self.label} response "
                f"(status {response.status_code}): {raw_body}",
                raw_body=raw_body,
                provider=self._config.provider,
            ) from exc

        error_message = self._extract_error(data) if isinstance(data, dict) else None
        if error_message is not None:
            raise BackendError(
                f"{self.label} error: {error_message}",
                provider=self._config.provider,
                status_code=response.status_code,
            )
        if response.is_error:
            raise BackendError(
                f"{self.label} error: HTTP {response.status_code}: {raw_body}",
                provider=self._config.provider,
                status_code=response.status_code,
            )

        try:
            result = self._parse_response(data)
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise ResponseParseError(
                f"Failed to parse {self.label} response ({exc!r}): {raw_body}",
                raw_body=raw_body,
                provider=self._config.provider,
            ) from exc

        logger.info(
            "%s response: input_tokens=%s output_tokens=%s",
            self.label,
            result.usage.input_tokens,
            result.usage.output_tokens,
        )
        return result

    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json"}

    def _extract_error(self, data: Dict[str, Any]) -> Optional[str]:
        """Return the backend's own error text if `data` is an error payload."""
        error = data.get("error")
        if not error:
            return None
        if isinstance(error, dict):
            return str(error.get("message") or error)
        return str(error)

    @abstractmethod
    def _endpoint(self) -> str:
        ...

    @abstractmethod
    def _build_payload(self, conversation: Conversation) -> Dict[str, Any]:
        ...

    @abstractmethod
    def _parse_response(self, data: Any) -> AIResponse:
        """Extract text and usage; raise KeyError/IndexError/TypeError on bad shape."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Short diagnostics label: backend family plus model id."""
        ...

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.get_name()!r}>"


def require_text(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected text content, got {type(value).__name__}")
    return value


def usage_from(block: Any, input_key: str, output_key: str) -> Usage:
    """Build Usage from an optional usage block, defaulting absent counts to zero."""
    if not isinstance(block, dict):
        return Usage()
    return Usage(
        input_tokens=int(block.get(input_key) or 0),
        output_tokens=int(block.get(output_key) or 0),
    )


def chat_completion_response(data: Any) -> AIResponse:
    """Parse the OpenAI chat-completions success shape shared by several backends."""
    content = data["choices"][0]["message"]["content"]
    return AIResponse(
        message=require_text(content),
        usage=usage_from(data.get("usage"), "prompt_tokens", "completion_tokens"),
    )
