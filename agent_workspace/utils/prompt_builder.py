from __future__ import annotations

import json
import logging
import threading
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from agent_workspace.schemas.marketing import ClientData, MarketingKitInput, WebsiteData

logger = logging.getLogger(__name__)


def build_code_review_prompt(code: str, language: str, context: Optional[str] = None) -> str:
    context_block = f"\n\nContext: {context}" if context else ""
    return f"""
You are an expert {language} code reviewer. Review the following code and provide feedback on:
1. Code quality and best practices
2. Potential bugs or issues
3. Performance improvements
4. Security concerns
{context_block}

Code to review:
```{language}
{code}
```
""".strip()


def build_customer_support_prompt(
    customer_message: str,
    context: Optional[Dict[str, Any]] = None,
) -> str:
    context_block = f"\n\nCustomer Context: {json.dumps(context)}" if context else ""
    return (
        f"You are a helpful customer support agent. {context_block}\n\n"
        f"Customer: {customer_message}"
    )


def build_data_analysis_prompt(data: Any, question: str, context: Optional[str] = None) -> str:
    context_block = f"\n\nContext: {context}" if context else ""
    return f"""
You are a data analysis expert. Analyze the following data and answer the question.
{context_block}

Data:
```json
{json.dumps(data, indent=2, default=str)}
```

Question: {question}

Provide insights, patterns, and recommendations based on the data.
""".strip()


def build_data_report_prompt(data: Any, title: str, metrics: List[str]) -> str:
    return f"""
You are a data analysis expert. Generate a professional report based on the following data.

Title: {title}
Key Metrics to Include: {", ".join(metrics)}

Data:
```json
{json.dumps(data, indent=2, default=str)}
```

Generate a comprehensive report with sections for:
1. Executive Summary
2. Key Findings
3. Detailed Analysis
4. Recommendations
""".strip()


MARKETING_KIT_MASTER_PROMPT = """
[ROLE]
Act as an expert brand and marketing strategist. Create and organize a complete Marketing Kit in one response. Focus ONLY on kit development. Use ONLY the inputs provided. If any info is missing, write [FILL] in the opening tables only, and list gaps under "Open Items." Do not invent facts.

[FORMAT CONTRACT - READ FIRST]
- The output MUST begin with exactly two Markdown tables, in this order and with these titles:
  1) "Kit Overview"
  2) "Kit Structure"
- Immediately after those, include a third table titled "Section-to-Engagement Index Mapping".
- Each MUST be a Markdown table, never lists or prose.
- If any field is unknown, fill with [FILL] while keeping the table structure.
- Do not add columns or rename titles.

[KIT SECTIONS - REQUIRED]
1. Overview - Purpose, how to use, quick summary
2. The Goal - Business and marketing goal, revenue and delivery model
3. Key Findings - 6 truths revealed by inputs
4. Market Landscape - Macro trends, competitor patterns, channel opportunities
5. Audience & Personas - 3-5 personas with labeled bullets
6. Brand Archetypes - Primary and secondary with mission, voice, values, promise
7. Brand Voice - Essence, purpose, personality, tone examples, taglines, dos and don'ts
8. Content - Keyword strategy, hubs, blog structure
9. Social Strategy - Channels, content types, cadence, goals, campaigns
10. Consistency Checklist - Final validation list
11. Open Items - Missing inputs and gaps
""".strip()


class TemplateState(str, Enum):
    NOT_LOADED = "not_loaded"
    LOADED = "loaded"
    FAILED = "failed"


class ReferenceTemplate:
    """
    Optional reference template read from disk at most once.

    A failed read (missing file, unreadable, not UTF-8) is remembered and not
    retried; `text()` then returns None.
    """

    def __init__(self, path: Optional[str | Path]) -> None:
        self._path = Path(path) if path else None
        self._state = TemplateState.NOT_LOADED
        self._text: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def state(self) -> TemplateState:
        return self._state

    def text(self) -> Optional[str]:
        if self._state is TemplateState.NOT_LOADED:
            with self._lock:
                if self._state is TemplateState.NOT_LOADED:
                    self._load()
        return self._text

    def _load(self) -> None:
        if self._path is None:
            self._state = TemplateState.FAILED
            return
        try:
            self._text = self._path.read_text(encoding="utf-8")
            self._state = TemplateState.LOADED
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Reference template %s unavailable: %s", self._path, exc)
            self._state = TemplateState.FAILED


def build_marketing_master_prompt(template: Optional[ReferenceTemplate] = None) -> str:
    reference = template.text() if template is not None else None
    if not reference:
        return MARKETING_KIT_MASTER_PROMPT
    return (
        f"{MARKETING_KIT_MASTER_PROMPT}\n\n[REFERENCE TEMPLATE - DO NOT ALTER]\n"
        f"{reference}\n\n[END REFERENCE TEMPLATE]"
    )


def _join(values: Optional[List[str]], separator: str = ", ") -> str:
    return separator.join(values) if values else "[Not provided]"


def build_client_context(payload: MarketingKitInput) -> str:
    client = payload.client_data
    lines = [
        f"Client Name: {client.client_name}",
        f"Brand Domain: {client.brand_domain}",
        f"Primary Offerings: {_join(client.primary_offerings)}",
        f"Priority Industries: {_join(client.priority_industries)}",
        f"Target Regions: {_join(client.target_regions)}",
        f"Business Goal: {client.business_goal or '[Not provided]'}",
        f"Revenue Model: {client.revenue_model or '[Not provided]'}",
        f"Delivery Model: {client.delivery_model or '[Not provided]'}",
        f"Ideal Customer Profile: {client.icp or '[Not provided]'}",
        f"Target Segments: {_join(client.target_segments)}",
        f"Pain Points: {_join(client.pain_points, '; ')}",
        f"Desired Outcomes: {_join(client.desired_outcomes, '; ')}",
        f"Differentiators: {_join(client.differentiators)}",
        f"Brand Promise: {client.brand_promise or '[Not provided]'}",
        f"Positioning Line: {client.positioning_line or '[Not provided]'}",
        f"Voice Traits: {_join(client.voice_traits)}",
        f"Core Keywords: {_join(client.core_keywords)}",
        f"Social Channels: {_join(client.social_channels)}",
    ]
    if client.competitors:
        competitors = "; ".join(f"{c.name} ({c.notes})" for c in client.competitors)
        lines.append(f"Competitors: {competitors}")
    if payload.website_data is not None:
        lines.append(f"\n[WEBSITE DATA]\n{_website_block(payload.website_data)}")
    if payload.meeting_notes:
        lines.append(f"\n[MEETING NOTES]\n{payload.meeting_notes}")
    if payload.questionnaire_responses:
        answers = "\n".join(f"Q: {q}\nA: {a}" for q, a in payload.questionnaire_responses.items())
        lines.append(f"\n[QUESTIONNAIRE]\n{answers}")
    if payload.case_studies_proof:
        lines.append("\n[CASE STUDIES]\n" + "\n".join(f"- {c}" for c in payload.case_studies_proof))
    if payload.additional_context:
        lines.append(f"\n[ADDITIONAL CONTEXT]\n{payload.additional_context}")
    return "\n".join(lines)


def _website_block(website: WebsiteData) -> str:
    parts = []
    if website.site_tagline:
        parts.append(f"Tagline: {website.site_tagline}")
    if website.homepage:
        parts.append(f"Homepage: {website.homepage}")
    if website.about_page:
        parts.append(f"About: {website.about_page}")
    if website.cta_text:
        parts.append(f"CTAs: {'; '.join(website.cta_text)}")
    if website.voice_samples:
        parts.append(f"Voice Samples: {'; '.join(website.voice_samples)}")
    return "\n".join(parts) or "[Not provided]"


def build_marketing_kit_prompt(
    payload: MarketingKitInput,
    template: Optional[ReferenceTemplate] = None,
) -> str:
    return f"""{build_marketing_master_prompt(template)}

[CLIENT INPUT DATA]
{build_client_context(payload)}

Generate a complete Marketing Kit following the exact structure and format specified above.
Ensure all opening tables are included first, then proceed with each section in order.
Use only the provided client data - do not invent facts.
If information is missing, mark with [FILL] in opening tables only and list gaps under "Open Items"."""


def build_brand_voice_prompt(client: ClientData, website: Optional[WebsiteData] = None) -> str:
    samples = ""
    if website is not None and website.voice_samples:
        samples = f"\nVoice Samples: {'; '.join(website.voice_samples)}"
    return f"""
You are a brand strategist. Based on this client data, create a detailed Brand Voice section:

Company: {client.client_name}
Primary Offerings: {_join(client.primary_offerings)}
Brand Promise: {client.brand_promise or "[Not provided]"}
Voice Traits: {_join(client.voice_traits)}
Differentiators: {_join(client.differentiators)}{samples}

Include: brand essence, purpose, personality, tone examples, 3 tagline options, and a dos and don'ts list.
""".strip()


def build_audience_personas_prompt(client: ClientData) -> str:
    return f"""
You are an audience strategist. Create 3-5 detailed buyer personas for:

Company: {client.client_name}
Primary Offerings: {_join(client.primary_offerings)}
Target Industries: {_join(client.priority_industries)}
Target Regions: {_join(client.target_regions)}
ICP: {client.icp or "[Not provided]"}
Pain Points: {_join(client.pain_points, "; ")}
Desired Outcomes: {_join(client.desired_outcomes, "; ")}

For each persona, include:
- Name and title
- Industry/role
- Primary pain point
- Desired outcome
- Buying process
- Key influences
- Common objections
- Success metric

Format as detailed paragraphs with labeled bullets.
""".strip()


def build_seo_strategy_prompt(client: ClientData) -> str:
    return f"""
You are an SEO strategist. Create a comprehensive SEO and keyword strategy for:

Company: {client.client_name}
Offerings: {_join(client.primary_offerings)}
Industries: {_join(client.priority_industries)}
Core Keywords: {_join(client.core_keywords)}
Differentiators: {_join(client.differentiators)}

Create a strategy including:
1. 4-5 keyword pillars with primary and secondary keywords
2. Content hub structure (/blog, /resources, /solutions, etc.)
3. Internal linking strategy
4. Target keyword difficulty levels
5. Content calendar themes aligned to keyword pillars

Format as narrative explanation + tables where appropriate.
""".strip()


DEFAULT_SOCIAL_CHANNELS = ["LinkedIn", "Twitter", "Facebook", "Instagram"]


def build_social_content_strategy_prompt(client: ClientData) -> str:
    channels = client.social_channels or DEFAULT_SOCIAL_CHANNELS
    return f"""
You are a content and social strategist. Create a social media and content strategy for:

Company: {client.client_name}
Offerings: {_join(client.primary_offerings)}
Target Audience: {client.icp or "[Not provided]"}
Social Channels: {", ".join(channels)}
Differentiators: {_join(client.differentiators)}

Include:
1. Channel selection and content type mix
2. Posting cadence by channel
3. Content pillars (education, entertainment, promotion, etc.)
4. Campaign themes (4-6 quarterly campaigns)
5. Hashtag strategy (brand, category, location buckets)
6. Engagement and community building approach

Format as lists, tables, and short narrative.
""".strip()


class ContentBriefType(str, Enum):
    BLOG = "blog"
    EMAIL = "email"
    SOCIAL = "social"
    LANDING_PAGE = "landing-page"


def _blog_brief(client: ClientData, topic: str) -> str:
    keywords = (
        f"\n\nUse these core keywords: {', '.join(client.core_keywords)}"
        if client.core_keywords
        else ""
    )
    return f"""
Create a comprehensive blog brief for a {client.client_name} blog post about "{topic}".

Include:
- SEO Keywords (primary + secondary)
- H1 and recommended H2 structure
- Target audience segment
- Key messaging points
- Internal links to use
- CTAs to include
- Word count target (at least 750 words)
- Voice and tone reminders{keywords}
""".strip()


def _email_brief(client: ClientData, topic: str) -> str:
    return f"""
Create an email brief for {client.client_name} about "{topic}".

Include:
- Email type (promotional, educational, nurture)
- Subject line (7 words or fewer)
- Preview line (80 characters or fewer)
- Email structure (hook, value, proof, CTA, PS)
- Target segment
- Primary and secondary CTAs
- Links to include
- Voice reminders
""".strip()


def _social_brief(client: ClientData, topic: str) -> str:
    channels = ", ".join(client.social_channels or ["LinkedIn", "Twitter"])
    return f"""
Create a social media posting brief for {client.client_name} about "{topic}".

Include:
- Platform-specific posts (LinkedIn, Twitter, Instagram, Facebook)
- Content hook/opening variation
- Hashtag recommendations (6-10 balanced mix)
- Visual guidelines
- CTA suggestions
- Posting cadence

Channels: {channels}
""".strip()


def _landing_page_brief(client: ClientData, topic: str) -> str:
    return f"""
Create a landing page brief for {client.client_name} about "{topic}".

Include:
- Page URL and meta information
- H1 headline and subheading
- Value proposition bullets (3-5)
- Problem and solution section outline
- Proof/social proof to highlight
- FAQ structure (6 questions)
- Primary and secondary CTAs
- Technical SEO requirements
""".strip()


_CONTENT_BRIEFS = {
    ContentBriefType.BLOG: _blog_brief,
    ContentBriefType.EMAIL: _email_brief,
    ContentBriefType.SOCIAL: _social_brief,
    ContentBriefType.LANDING_PAGE: _landing_page_brief,
}


def build_content_brief_prompt(
    content_type: str | ContentBriefType,
    client: ClientData,
    topic: str,
) -> str:
    """
    Brief for a single piece of content. Unrecognized content types get the
    blog brief.
    """
    try:
        brief_type = ContentBriefType(content_type)
    except ValueError:
        logger.warning("Unknown content brief type %r; using blog", content_type)
        brief_type = ContentBriefType.BLOG
    return _CONTENT_BRIEFS[brief_type](client, topic)
