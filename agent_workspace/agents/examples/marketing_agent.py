from __future__ import annotations

from typing import Optional, Union

from agent_workspace.agents.assistant_agent import AssistantAgent
from agent_workspace.core.config import get_settings
from agent_workspace.providers.base import LLMProvider
from agent_workspace.schemas.marketing import ClientData, MarketingKitInput, WebsiteData
from agent_workspace.utils.prompt_builder import (
    ContentBriefType,
    ReferenceTemplate,
    build_audience_personas_prompt,
    build_brand_voice_prompt,
    build_content_brief_prompt,
    build_marketing_kit_prompt,
    build_seo_strategy_prompt,
    build_social_content_strategy_prompt,
)


class MarketingAgent(AssistantAgent):
    """
    Generates marketing kits from client data.

    Layout stays constant across kits; only the copy follows the client input.
    When AI_MARKETING_TEMPLATE_PATH points at a readable file, its text is
    appended to the master prompt as a reference template.
    """

    def __init__(
        self,
        provider: Optional[LLMProvider] = None,
        template: Optional[ReferenceTemplate] = None,
    ) -> None:
        super().__init__(provider)
        self._template = template or ReferenceTemplate(get_settings().marketing_template_path)

    async def generate_marketing_kit(self, payload: MarketingKitInput) -> str:
        response = await self.ask(build_marketing_kit_prompt(payload, self._template))
        return response.message

    async def generate_brand_voice(
        self,
        client: ClientData,
        website: Optional[WebsiteData] = None,
    ) -> str:
        response = await self.ask(build_brand_voice_prompt(client, website))
        return response.message

    async def generate_audience_personas(self, client: ClientData) -> str:
        response = await self.ask(build_audience_personas_prompt(client))
        return response.message

    async def generate_seo_strategy(self, client: ClientData) -> str:
        response = await self.ask(build_seo_strategy_prompt(client))
        return response.message

    async def generate_social_and_content_strategy(self, client: ClientData) -> str:
        response = await self.ask(build_social_content_strategy_prompt(client))
        return response.message

    async def generate_content_brief(
        self,
        content_type: Union[str, ContentBriefType],
        client: ClientData,
        topic: str,
    ) -> str:
        """Brief for a blog post, email, social post or landing page on `topic`."""
        response = await self.ask(build_content_brief_prompt(content_type, client, topic))
        return response.message
