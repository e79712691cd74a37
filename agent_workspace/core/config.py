from __future__ import annotations

import logging
import math
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Project root for .env loading when running from a checkout.
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

DEFAULT_TEMPERATURE: float = 0.7
DEFAULT_MAX_TOKENS: int = 2048
DEFAULT_TIMEOUT_SECONDS: float = 120.0


class AIProvider(str, Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    OLLAMA = "ollama"
    GITHUB_MODELS = "github"


DEFAULT_PROVIDER = AIProvider.OPENAI

DEFAULT_MODELS: dict[AIProvider, str] = {
    AIProvider.OPENAI: "gpt-4o-mini",
    AIProvider.ANTHROPIC: "claude-3-haiku-20240307",
    AIProvider.OLLAMA: "mistral",
    AIProvider.GITHUB_MODELS: "gpt-4o-mini",
}

PROVIDER_ENDPOINTS: dict[AIProvider, str] = {
    AIProvider.OPENAI: "https://api.openai.com/v1",
    AIProvider.ANTHROPIC: "https://api.anthropic.com",
    AIProvider.OLLAMA: "http://localhost:11434",
    AIProvider.GITHUB_MODELS: "https://models.github.ai/inference",
}

# Backends reachable without a credential.
KEYLESS_PROVIDERS: frozenset[AIProvider] = frozenset({AIProvider.OLLAMA})


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.
    """

    # Core app settings
    app_name: str = Field(default="agent_workspace")
    environment: str = Field(default="development")  # development | staging | production
    debug: bool = Field(default=False)

    # HTTP server
    api_prefix: str = Field(default="/api")

    # Observability
    log_level: str = Field(default="INFO")

    # Provider selection ("openai" | "anthropic" | "ollama" | "github")
    provider: str = Field(
        default=DEFAULT_PROVIDER.value,
        description="Backend selector. Unknown values fall back to openai.",
    )
    api_key: Optional[str] = Field(
        default=None,
        description="API key or token. Required for every backend except ollama.",
    )
    model: Optional[str] = Field(
        default=None,
        description="Backend-specific model id. Defaults per backend when unset.",
    )
    base_url: Optional[str] = Field(
        default=None,
        description="Endpoint override, only used by the ollama backend.",
    )
    temperature: float = Field(default=DEFAULT_TEMPERATURE)
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS)

    # Optional reference template appended to the marketing kit prompt.
    marketing_template_path: Optional[str] = Field(default=None)

    model_config = SettingsConfigDict(
        env_prefix="AI_",
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("provider", mode="before")
    @classmethod
    def _normalize_provider(cls, value: Any) -> str:
        if _is_blank(value):
            return DEFAULT_PROVIDER.value
        name = str(value).strip().lower()
        if name not in {p.value for p in AIProvider}:
            logger.warning(
                "Unknown AI provider %r; falling back to %s", value, DEFAULT_PROVIDER.value
            )
            return DEFAULT_PROVIDER.value
        return name

    @field_validator("api_key", "model", "base_url", "marketing_template_path", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if _is_blank(value):
            return None
        return value.strip() if isinstance(value, str) else value

    @field_validator("temperature", mode="before")
    @classmethod
    def _parse_temperature(cls, value: Any) -> float:
        if _is_blank(value):
            return DEFAULT_TEMPERATURE
        try:
            parsed = float(value)
        except (TypeError, ValueError):
            parsed = math.nan
        if not math.isfinite(parsed) or parsed < 0:
            logger.warning(
                "Invalid AI_TEMPERATURE %r; using default %s", value, DEFAULT_TEMPERATURE
            )
            return DEFAULT_TEMPERATURE
        return parsed

    @field_validator("max_tokens", mode="before")
    @classmethod
    def _parse_max_tokens(cls, value: Any) -> int:
        if _is_blank(value):
            return DEFAULT_MAX_TOKENS
        try:
            parsed = int(str(value).strip())
        except (TypeError, ValueError):
            parsed = 0
        if parsed <= 0:
            logger.warning(
                "Invalid AI_MAX_TOKENS %r; using default %s", value, DEFAULT_MAX_TOKENS
            )
            return DEFAULT_MAX_TOKENS
        return parsed

    @field_validator("timeout_seconds", mode="before")
    @classmethod
    def _parse_timeout(cls, value: Any) -> float:
        if _is_blank(value):
            return DEFAULT_TIMEOUT_SECONDS
        try:
            parsed = float(value)
        except (TypeError, ValueError):
            parsed = math.nan
        if not math.isfinite(parsed) or parsed <= 0:
            logger.warning(
                "Invalid AI_TIMEOUT_SECONDS %r; using default %s",
                value,
                DEFAULT_TIMEOUT_SECONDS,
            )
            return DEFAULT_TIMEOUT_SECONDS
        return parsed


class ProviderConfig(BaseModel):
    """
    Resolved, immutable configuration for one provider instance.

    `provider` is kept as a plain identifier; the factory decides whether it
    names a supported backend.
    """

    model_config = ConfigDict(frozen=True)

    provider: str
    api_key: Optional[str] = None
    model: str
    base_url: Optional[str] = None
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, ge=1)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return a cached settings instance for use as a dependency.
    """
    return Settings()


def load_provider_config(settings: Optional[Settings] = None) -> ProviderConfig:
    """
    Resolve the active backend and its parameters from settings.

    A missing credential for a backend that needs one is only a warning here;
    the provider constructor raises if it is actually used.
    """
    settings = settings or get_settings()
    provider = AIProvider(settings.provider)

    if not settings.api_key and provider not in KEYLESS_PROVIDERS:
        logger.warning(
            "No API key provided for %s. Set AI_API_KEY environment variable.",
            provider.value,
        )

    return ProviderConfig(
        provider=provider.value,
        api_key=settings.api_key,
        model=settings.model or DEFAULT_MODELS[provider],
        base_url=settings.base_url,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
        timeout_seconds=settings.timeout_seconds,
    )
