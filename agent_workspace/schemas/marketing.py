from typing import Dict, List, Optional

from pydantic import BaseModel, Field, constr


class Competitor(BaseModel):
    name: str
    notes: str = ""


class ClientData(BaseModel):
    """
    Client input for marketing kit generation.
    """

    client_name: constr(min_length=1)
    brand_domain: str
    primary_offerings: List[str] = Field(default_factory=list)
    priority_industries: List[str] = Field(default_factory=list)
    target_regions: List[str] = Field(default_factory=list)

    business_goal: Optional[str] = None
    revenue_model: Optional[str] = None
    delivery_model: Optional[str] = None
    icp: Optional[str] = Field(default=None, description="Ideal customer profile.")
    target_segments: Optional[List[str]] = None
    pain_points: Optional[List[str]] = None
    desired_outcomes: Optional[List[str]] = None
    competitors: Optional[List[Competitor]] = None
    differentiators: Optional[List[str]] = None
    brand_promise: Optional[str] = None
    positioning_line: Optional[str] = None
    voice_traits: Optional[List[str]] = None
    core_keywords: Optional[List[str]] = None
    social_channels: Optional[List[str]] = None


class WebsiteData(BaseModel):
    homepage: Optional[str] = None
    about_page: Optional[str] = None
    cta_text: Optional[List[str]] = None
    site_tagline: Optional[str] = None
    voice_samples: Optional[List[str]] = None


class MarketingKitInput(BaseModel):
    client_data: ClientData
    website_data: Optional[WebsiteData] = None
    meeting_notes: Optional[str] = None
    questionnaire_responses: Optional[Dict[str, str]] = None
    case_studies_proof: Optional[List[str]] = None
    additional_context: Optional[str] = None
