from __future__ import annotations

import logging
from typing import Optional

import httpx

from agent_workspace.core.config import AIProvider, ProviderConfig, load_provider_config
from agent_workspace.core.errors import UnsupportedProviderError
from agent_workspace.providers.anthropic_provider import AnthropicProvider
from agent_workspace.providers.base import LLMProvider
from agent_workspace.providers.github_models_provider import GitHubModelsProvider
from agent_workspace.providers.ollama_provider import OllamaProvider
from agent_workspace.providers.openai_provider import OpenAIProvider

logger = logging.getLogger(__name__)

PROVIDER_REGISTRY: dict[str, type[LLMProvider]] = {
    AIProvider.OPENAI.value: OpenAIProvider,
    AIProvider.ANTHROPIC.value: AnthropicProvider,
    AIProvider.OLLAMA.value: OllamaProvider,
    AIProvider.GITHUB_MODELS.value: GitHubModelsProvider,
}


def supported_providers() -> tuple[str, ...]:
    return tuple(PROVIDER_REGISTRY)


def get_provider(
    config: Optional[ProviderConfig] = None,
    client: httpx.AsyncClient | None = None,
) -> LLMProvider:
    """Return the LLM provider matching the configured backend selector."""
    if config is None:
        config = load_provider_config()
    name = config.provider.strip().lower()

    provider_cls = PROVIDER_REGISTRY.get(name)
    if provider_cls is None:
        raise UnsupportedProviderError(config.provider, supported_providers())

    provider = provider_cls(config, client=client)
    logger.info("LLM provider initialized: %s", provider.get_name())
    return provider
