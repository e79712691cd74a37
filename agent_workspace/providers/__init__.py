"""
LLM provider abstraction layer.

All backend-specific wire handling lives in provider implementations.
Callers depend only on the LLMProvider interface and get_provider().
"""

from agent_workspace.providers.base import LLMProvider
from agent_workspace.providers.factory import get_provider, supported_providers

__all__ = ["LLMProvider", "get_provider", "supported_providers"]
