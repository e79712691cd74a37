from agent_workspace.resources.base import Resource

__all__ = ["Resource"]
