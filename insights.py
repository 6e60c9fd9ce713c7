# insights.py
import asyncio
import logging
import textwrap
from typing import Any, Dict, Optional

from openai import AsyncOpenAI

from config import settings
from models import InvestorCriteria, MatchInsights, StartupProfile

logger = logging.getLogger(__name__)

INSIGHTS_SCHEMA: Dict[str, Any] = {
    "name": "MatchInsights",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "explanation": {
                "type": "string",
                "description": MatchInsights.model_fields["explanation"].description,
            },
            "outreach": {
                "type": "string",
                "description": MatchInsights.model_fields["outreach"].description,
            },
        },
        "required": ["explanation", "outreach"],
        "additionalProperties": False,
    },
}


PROMPT_TEMPLATE = textwrap.dedent("""\
    You are a professional investment matchmaker connecting investors with startups.

    INVESTOR PROFILE:
    - Name: {investor_name}
    - Industries: {industries}
    - Stages: {stages}
    - Check Size: {check_min} - {check_max}
    - Geography: {geographies}

    STARTUP PROFILE:
    - Name: {startup_name}
    - Industry: {industry}
    - Stage: {stage}
    - Raising: {raising}
    - Geography: {geography}
    - Description: {description}
    """)


def _millions(amount: float) -> str:
    return f"${amount / 1_000_000:.1f}M"


def build_prompt(investor: InvestorCriteria, startup: StartupProfile) -> str:
    metrics = []
    if startup.metrics.arr:
        metrics.append(f"- ARR: ${startup.metrics.arr / 1_000:.0f}K")
    if startup.metrics.customers:
        metrics.append(f"- Customers: {startup.metrics.customers}")
    if startup.metrics.growth:
        metrics.append(f"- Growth: {startup.metrics.growth}")
    if startup.founders:
        metrics.append(f"- Founders: {', '.join(f.name for f in startup.founders)}")

    prompt = PROMPT_TEMPLATE.format(
        investor_name=investor.name,
        industries=", ".join(investor.industries),
        stages=", ".join(investor.stages),
        check_min=_millions(investor.check_size.min),
        check_max=_millions(investor.check_size.max),
        geographies=", ".join(investor.geography),
        startup_name=startup.name,
        industry=startup.industry,
        stage=startup.stage,
        raising=_millions(startup.raising),
        geography=startup.geography,
        description=startup.description,
    )
    if metrics:
        prompt += "\n".join(metrics) + "\n"
    prompt += (
        f"\nGenerate personalized match insights for {investor.name}. "
        "Return JSON with keys: explanation (one sentence, max 25 words), "
        "outreach (40-50 words, written by the investor in first person)."
    )
    return prompt


def fallback_insights(investor: InvestorCriteria, startup: StartupProfile) -> MatchInsights:
    industry = investor.industries[0]
    return MatchInsights(
        explanation=f"Strong {industry} and {startup.stage} alignment with check size fit.",
        outreach=(
            f"Hi {startup.name} team! I'm {investor.name}, and I invest in {industry} companies "
            f"at the {startup.stage} stage. Your work caught my attention - would love to learn "
            f"more about your round. Available for a 15-min call this week?"
        ),
    )


class InsightGenerator:
    """Writes the explanation and outreach message for one investor/startup pair.

    Never raises: any failure of the text model (transport error, timeout,
    empty or malformed output) yields the templated fallback instead.
    """

    def __init__(
        self,
        client: Optional[Any] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        temperature: Optional[float] = None,
    ):
        if client is None and settings.openai_api_key:
            client = AsyncOpenAI(api_key=settings.openai_api_key)
        self.client = client
        self.model = model or settings.openai_model
        self.timeout = timeout if timeout is not None else settings.insight_timeout
        self.temperature = temperature if temperature is not None else settings.insight_temperature

    async def _request(self, prompt: str) -> MatchInsights:
        resp = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            response_format={"type": "json_schema", "json_schema": INSIGHTS_SCHEMA},
            max_tokens=settings.insight_max_tokens,
            temperature=self.temperature,
        )
        content = resp.choices[0].message.content
        if not content:
            raise ValueError("empty completion")
        return MatchInsights.model_validate_json(content)

    async def generate(self, investor: InvestorCriteria, startup: StartupProfile) -> MatchInsights:
        if self.client is None:
            logger.warning(f"No OpenAI client configured, using fallback insights for {startup.name}")
            return fallback_insights(investor, startup)

        prompt = build_prompt(investor, startup)
        try:
            insights = await asyncio.wait_for(self._request(prompt), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Insight generation timed out after {self.timeout}s for {startup.name}")
            return fallback_insights(investor, startup)
        except Exception as e:
            logger.error(f"Insight generation failed for {startup.name}: {e}")
            return fallback_insights(investor, startup)

        logger.info(f"AI insights for {startup.name}: {insights.explanation}")
        return insights
