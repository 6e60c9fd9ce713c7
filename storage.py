# storage.py
import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from models import InvestorCriteria, MatchResult, StartupProfile

logger = logging.getLogger(__name__)


class ProfileStore(ABC):
    """Read side of the profile store used by the matching engine."""

    @abstractmethod
    def get_investor(self, investor_id: str) -> Optional[InvestorCriteria]:
        ...

    @abstractmethod
    def list_startups(self) -> List[StartupProfile]:
        ...


class InMemoryStore(ProfileStore):
    # Process-local, data resets on restart
    def __init__(self, startups: Optional[Iterable[StartupProfile]] = None):
        self._investors: Dict[str, InvestorCriteria] = {}
        self._startups: List[StartupProfile] = list(startups or [])
        self._matches: Dict[str, List[MatchResult]] = {}

    def save_investor(self, investor: InvestorCriteria):
        self._investors[investor.id] = investor
        logger.info(f"Saved investor: {investor.id}")

    def get_investor(self, investor_id: str) -> Optional[InvestorCriteria]:
        return self._investors.get(investor_id)

    def seed_startups(self, startups: Iterable[StartupProfile]):
        self._startups = list(startups)
        logger.info(f"Seeded {len(self._startups)} startups")

    def add_startups(self, startups: Iterable[StartupProfile]):
        self._startups.extend(startups)

    def list_startups(self) -> List[StartupProfile]:
        return list(self._startups)

    def save_matches(self, investor_id: str, matches: List[MatchResult]):
        self._matches[investor_id] = list(matches)

    def get_matches(self, investor_id: str) -> List[MatchResult]:
        return list(self._matches.get(investor_id, []))

    def clear(self):
        self._investors.clear()
        self._startups = []
        self._matches.clear()
