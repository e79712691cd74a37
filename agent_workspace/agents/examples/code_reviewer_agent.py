from __future__ import annotations

from typing import Optional

from agent_workspace.agents.assistant_agent import AssistantAgent
from agent_workspace.utils.prompt_builder import build_code_review_prompt


class CodeReviewerAgent(AssistantAgent):
    """Reviews a code snippet for quality, bugs, performance and security."""

    async def review_code(self, code: str, language: str, context: Optional[str] = None) -> str:
        response = await self.ask(build_code_review_prompt(code, language, context))
        return response.message
