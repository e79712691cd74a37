import json
import os
from typing import Any, Callable, Dict, List

import httpx
import pytest

from agent_workspace.core.config import ProviderConfig, get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Drop AI_* variables from the environment and reset the settings cache."""
    for key in list(os.environ):
        if key.upper().startswith("AI_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class RecordingBackend:
    """httpx mock transport that records requests and replays a handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


def make_config(provider: str, **overrides: Any) -> ProviderConfig:
    values: Dict[str, Any] = {
        "provider": provider,
        "api_key": "test-key",
        "model": "test-model",
    }
    values.update(overrides)
    return ProviderConfig(**values)


def json_response(status_code: int, body: Any) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(body).encode(),
        headers={"Content-Type": "application/json"},
    )
