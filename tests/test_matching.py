import asyncio

import pytest

from insights import InsightGenerator, fallback_insights
from matching import (
    InvestorNotFoundError,
    NoCandidatesError,
    find_matches,
    find_matches_for_investor,
    rank_startups,
)
from models import MatchInsights
from scoring import score_startup
from seed_data import SEED_STARTUPS
from storage import InMemoryStore


class DelayedGenerator:
    """Insight generator that answers each startup after a configurable delay."""

    def __init__(self, delays):
        self.delays = delays
        self.finished = []

    async def generate(self, investor, startup):
        await asyncio.sleep(self.delays.get(startup.id, 0))
        self.finished.append(startup.id)
        return MatchInsights(explanation=f"why {startup.id}", outreach=f"hello {startup.id}")


def _varied_startups(make_startup, count):
    # raising drifts away from the investor range so scores strictly decrease
    return [make_startup(id=f"s-{i}", raising=3_000_000 + i * 200_000) for i in range(count)]


class TestRankStartups:
    def test_ties_keep_input_order(self, investor, make_startup):
        startups = [make_startup(id=f"s-{i}") for i in range(7)]
        top = rank_startups(investor, startups, 5)
        assert [s.startup.id for s in top] == ["s-0", "s-1", "s-2", "s-3", "s-4"]

    def test_sorted_descending(self, investor, make_startup):
        startups = [
            make_startup(id="low", industry="Robotics", stage="Series C"),
            make_startup(id="high"),
            make_startup(id="mid", stage="Series C"),
        ]
        top = rank_startups(investor, startups, 5)
        assert [s.startup.id for s in top] == ["high", "mid", "low"]
        assert [s.score for s in top] == [100, 70, 35]


@pytest.mark.asyncio
async def test_returns_top_five_of_eight(investor, failing_client):
    matches = await find_matches(investor, SEED_STARTUPS, InsightGenerator(client=failing_client), limit=5)

    assert len(matches) == 5
    assert [m.rank for m in matches] == [1, 2, 3, 4, 5]
    scores = [m.internal_score for m in matches]
    assert scores == sorted(scores, reverse=True)
    assert len({m.profile.id for m in matches}) == 5
    for m in matches:
        assert m.internal_score == score_startup(investor, m.profile)


@pytest.mark.asyncio
async def test_returns_all_when_fewer_than_limit(investor, make_startup, good_client):
    startups = _varied_startups(make_startup, 3)
    matches = await find_matches(investor, startups, InsightGenerator(client=good_client), limit=5)
    assert len(matches) == 3
    assert [m.rank for m in matches] == [1, 2, 3]


@pytest.mark.asyncio
async def test_default_limit_from_settings(investor, make_startup, good_client):
    startups = _varied_startups(make_startup, 9)
    matches = await find_matches(investor, startups, InsightGenerator(client=good_client))
    assert len(matches) == 5


@pytest.mark.asyncio
async def test_empty_candidates_raises(investor, good_client):
    with pytest.raises(NoCandidatesError):
        await find_matches(investor, [], InsightGenerator(client=good_client))
    good_client.chat.completions.create.assert_not_called()


@pytest.mark.asyncio
async def test_failing_backend_still_fills_every_match(investor, failing_client):
    matches = await find_matches(investor, SEED_STARTUPS, InsightGenerator(client=failing_client))

    for m in matches:
        assert m.explanation and m.outreach
        expected = fallback_insights(investor, m.profile)
        assert m.explanation == expected.explanation
        assert m.outreach == expected.outreach
        assert m.profile.name in m.outreach
        assert investor.name in m.outreach


@pytest.mark.asyncio
async def test_insights_attach_to_their_own_startup(investor, make_startup, good_client):
    startups = _varied_startups(make_startup, 5)
    matches = await find_matches(investor, startups, InsightGenerator(client=good_client))
    for m in matches:
        assert m.explanation == f"{m.profile.name} fits your thesis."
    assert good_client.chat.completions.create.await_count == 5


@pytest.mark.asyncio
async def test_slow_insight_does_not_change_rank(investor, make_startup):
    startups = _varied_startups(make_startup, 5)
    generator = DelayedGenerator({"s-0": 0.2})

    matches = await find_matches(investor, startups, generator)

    # the top startup finished last but keeps rank 1
    assert generator.finished[-1] == "s-0"
    assert [m.profile.id for m in matches] == ["s-0", "s-1", "s-2", "s-3", "s-4"]
    assert matches[0].rank == 1
    assert matches[0].explanation == "why s-0"


@pytest.mark.asyncio
async def test_insights_run_concurrently(investor, make_startup):
    startups = _varied_startups(make_startup, 5)
    generator = DelayedGenerator({s.id: 0.2 for s in startups})

    loop = asyncio.get_running_loop()
    started = loop.time()
    await find_matches(investor, startups, generator)
    elapsed = loop.time() - started

    assert elapsed < 0.8


class TestFindMatchesForInvestor:
    @pytest.mark.asyncio
    async def test_unknown_investor(self, good_client, make_startup):
        store = InMemoryStore([make_startup()])
        with pytest.raises(InvestorNotFoundError) as exc:
            await find_matches_for_investor("missing", store, InsightGenerator(client=good_client))
        assert exc.value.investor_id == "missing"

    @pytest.mark.asyncio
    async def test_empty_store(self, investor, good_client):
        store = InMemoryStore()
        store.save_investor(investor)
        with pytest.raises(NoCandidatesError):
            await find_matches_for_investor(investor.id, store, InsightGenerator(client=good_client))

    @pytest.mark.asyncio
    async def test_uses_store_profiles(self, investor, good_client):
        store = InMemoryStore(SEED_STARTUPS)
        store.save_investor(investor)
        matches = await find_matches_for_investor(investor.id, store, InsightGenerator(client=good_client))
        assert len(matches) == 5
        assert {m.profile.id for m in matches} <= {s.id for s in SEED_STARTUPS}


@pytest.mark.asyncio
async def test_explicit_zero_limit_returns_nothing(investor, make_startup, good_client):
    startups = _varied_startups(make_startup, 3)
    matches = await find_matches(investor, startups, InsightGenerator(client=good_client), limit=0)
    assert matches == []
    good_client.chat.completions.create.assert_not_called()
