# scoring.py
import math
from typing import Dict

from models import InvestorCriteria, StartupProfile

INDUSTRY_WEIGHT = 35
STAGE_WEIGHT = 30
CHECK_SIZE_WEIGHT = 25
GEOGRAPHY_WEIGHT = 10
GEOGRAPHY_PARTIAL = 5
GLOBAL_GEOGRAPHY = "Global"


def _overlaps(a: str, b: str) -> bool:
    a, b = a.lower(), b.lower()
    return a in b or b in a


def industry_points(investor: InvestorCriteria, startup: StartupProfile) -> float:
    if any(_overlaps(ind, startup.industry) for ind in investor.industries):
        return INDUSTRY_WEIGHT
    return 0


def stage_points(investor: InvestorCriteria, startup: StartupProfile) -> float:
    return STAGE_WEIGHT if startup.stage in investor.stages else 0


def check_size_points(investor: InvestorCriteria, startup: StartupProfile) -> float:
    """Full credit inside the range, linear partial credit outside it.

    The penalty is distance to the nearest boundary over half the range
    maximum, scaled to the weight and clamped to [0, weight].
    """
    low, high = investor.check_size.min, investor.check_size.max
    raising = startup.raising
    if low <= raising <= high:
        return CHECK_SIZE_WEIGHT

    distance = low - raising if raising < low else raising - high
    max_distance = high * 0.5
    if max_distance <= 0:
        return 0
    penalty = min(CHECK_SIZE_WEIGHT, max(0.0, distance / max_distance * CHECK_SIZE_WEIGHT))
    return CHECK_SIZE_WEIGHT - penalty


def geography_points(investor: InvestorCriteria, startup: StartupProfile) -> float:
    # geography is a soft preference, a miss still earns partial credit
    for geo in investor.geography:
        if geo == GLOBAL_GEOGRAPHY or _overlaps(geo, startup.geography):
            return GEOGRAPHY_WEIGHT
    return GEOGRAPHY_PARTIAL


def score_breakdown(investor: InvestorCriteria, startup: StartupProfile) -> Dict[str, float]:
    """Return the points earned on each dimension."""
    return {
        "industry": industry_points(investor, startup),
        "stage": stage_points(investor, startup),
        "check_size": check_size_points(investor, startup),
        "geography": geography_points(investor, startup),
    }


def score_startup(investor: InvestorCriteria, startup: StartupProfile) -> int:
    """Deterministic compatibility score in [0, 100]."""
    total = sum(score_breakdown(investor, startup).values())
    # round half up
    return max(0, min(100, int(math.floor(total + 0.5))))
