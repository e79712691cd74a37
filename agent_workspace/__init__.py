"""
Agent Workspace: one assistant interface over several LLM backends
(OpenAI, Anthropic, GitHub Models, local Ollama), selected from the
environment. Layout: agents/, api/, core/, providers/, schemas/, utils/.
"""
__version__ = "0.1.0"

__all__ = ["__version__"]
