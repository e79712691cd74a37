from __future__ import annotations

from typing import Any, Dict, Optional

from agent_workspace.agents.assistant_agent import AssistantAgent
from agent_workspace.utils.prompt_builder import build_customer_support_prompt


class CustomerSupportAgent(AssistantAgent):
    async def handle_customer_query(
        self,
        customer_message: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> str:
        response = await self.ask(build_customer_support_prompt(customer_message, context))
        return response.message
