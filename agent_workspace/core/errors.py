"""
Error taxonomy for the provider layer.

Providers raise the typed errors below. Transport failures are left as the
underlying httpx exceptions; `classify_error` maps everything to an ErrorKind
for callers that need to branch on the failure category.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

import httpx


class ErrorKind(str, Enum):
    CONFIG = "config"
    UNSUPPORTED_BACKEND = "unsupported_backend"
    TRANSPORT = "transport"
    BACKEND = "backend"
    PARSE = "parse"
    INVALID_REQUEST = "invalid_request"


class ProviderError(Exception):
    """Base exception for LLM provider errors."""

    kind: ErrorKind = ErrorKind.BACKEND

    def __init__(self, message: str, provider: Optional[str] = None) -> None:
        super().__init__(message)
        self.provider = provider


class ProviderConfigError(ProviderError, ValueError):
    """Raised when a provider is built without the configuration it requires."""

    kind = ErrorKind.CONFIG

    def __init__(self, message: str, key: str, provider: Optional[str] = None) -> None:
        super().__init__(message, provider=provider)
        self.key = key


class UnsupportedProviderError(ProviderError, ValueError):
    kind = ErrorKind.UNSUPPORTED_BACKEND

    def __init__(self, identifier: str, supported: tuple[str, ...]) -> None:
        super().__init__(
            f"Unsupported AI provider: {identifier!r}. "
            f"Use one of: {', '.join(supported)}.",
            provider=identifier,
        )
        self.identifier = identifier


class BackendError(ProviderError):
    """The backend answered with an error payload or an error status."""

    kind = ErrorKind.BACKEND

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, provider=provider)
        self.status_code = status_code


class ResponseParseError(ProviderError):
    """The backend answered but the body was not the expected structure."""

    kind = ErrorKind.PARSE

    def __init__(self, message: str, raw_body: str, provider: Optional[str] = None) -> None:
        super().__init__(message, provider=provider)
        self.raw_body = raw_body


class AgentError(Exception):
    """Facade-level failure wrapping any provider or transport error."""

    def __init__(self, message: str, kind: ErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


def classify_error(exc: BaseException) -> ErrorKind:
    if isinstance(exc, ProviderError):
        return exc.kind
    if isinstance(exc, httpx.TransportError):
        return ErrorKind.TRANSPORT
    return ErrorKind.BACKEND
