from agent_workspace.agents.assistant_agent import AssistantAgent

__all__ = ["AssistantAgent"]
