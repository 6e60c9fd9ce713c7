# matching.py
import asyncio
import logging
from typing import List, Optional, Sequence

from config import settings
from insights import InsightGenerator
from models import InvestorCriteria, MatchResult, ScoredStartup, StartupProfile
from scoring import score_startup
from storage import ProfileStore

logger = logging.getLogger(__name__)


class MatchingError(Exception):
    """Base class for request-level matching failures."""


class InvestorNotFoundError(MatchingError):
    def __init__(self, investor_id: str):
        super().__init__(f"Investor profile not found: {investor_id}")
        self.investor_id = investor_id


class NoCandidatesError(MatchingError):
    def __init__(self):
        super().__init__("No startups available")


def rank_startups(investor: InvestorCriteria, startups: Sequence[StartupProfile], limit: int) -> List[ScoredStartup]:
    """Score every startup and keep the best `limit`, ties in input order."""
    scored = [ScoredStartup(startup=s, score=score_startup(investor, s)) for s in startups]
    # sorted() is stable, so equal scores keep their input order
    scored = sorted(scored, key=lambda s: s.score, reverse=True)
    return scored[:limit]


async def find_matches(
    investor: InvestorCriteria,
    startups: Sequence[StartupProfile],
    generator: InsightGenerator,
    limit: Optional[int] = None,
) -> List[MatchResult]:
    """Top startup matches for an investor, each with generated insights.

    Scores every startup, keeps the top `limit` (default from settings) and
    generates insights for them concurrently. Result order follows the score
    ranking, not the order in which the insight calls finish.
    """
    if not startups:
        raise NoCandidatesError()
    if limit is None:
        limit = settings.match_limit

    logger.info(f"Finding matches for {investor.name}...")
    top = rank_startups(investor, startups, limit)
    logger.info(f"Top {len(top)} by score: " + ", ".join(f"{s.startup.name}={s.score}" for s in top))

    # gather returns results in argument order regardless of completion order
    insights = await asyncio.gather(*(generator.generate(investor, s.startup) for s in top))

    matches = [
        MatchResult(
            profile=scored.startup,
            rank=rank,
            explanation=insight.explanation,
            outreach=insight.outreach,
            internal_score=scored.score,
        )
        for rank, (scored, insight) in enumerate(zip(top, insights), start=1)
    ]
    logger.info(f"Generated {len(matches)} matches for {investor.name}")
    return matches


async def find_matches_for_investor(
    investor_id: str,
    store: ProfileStore,
    generator: InsightGenerator,
    limit: Optional[int] = None,
) -> List[MatchResult]:
    investor = store.get_investor(investor_id)
    if investor is None:
        raise InvestorNotFoundError(investor_id)
    return await find_matches(investor, store.list_startups(), generator, limit=limit)
