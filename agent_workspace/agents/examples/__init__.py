from agent_workspace.agents.examples.code_reviewer_agent import CodeReviewerAgent
from agent_workspace.agents.examples.customer_support_agent import CustomerSupportAgent
from agent_workspace.agents.examples.data_analyst_agent import DataAnalystAgent
from agent_workspace.agents.examples.marketing_agent import MarketingAgent

__all__ = [
    "CodeReviewerAgent",
    "CustomerSupportAgent",
    "DataAnalystAgent",
    "MarketingAgent",
]
