from __future__ import annotations

from typing import Any, List, Optional

from agent_workspace.agents.assistant_agent import AssistantAgent
from agent_workspace.utils.prompt_builder import (
    build_data_analysis_prompt,
    build_data_report_prompt,
)


class DataAnalystAgent(AssistantAgent):
    """Answers questions about JSON-serializable data and writes reports."""

    async def analyze_data(self, data: Any, question: str, context: Optional[str] = None) -> str:
        response = await self.ask(build_data_analysis_prompt(data, question, context))
        return response.message

    async def generate_report(self, data: Any, title: str, metrics: List[str]) -> str:
        response = await self.ask(build_data_report_prompt(data, title, metrics))
        return response.message
