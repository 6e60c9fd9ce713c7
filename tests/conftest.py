"""
Shared fixtures for the matching test suite.

Provides sample investor/startup profiles and fake OpenAI clients so no test
touches the network.
"""
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from models import CheckSize, InvestorCriteria, StartupMetrics, StartupProfile


def completion(content):
    """Build an object shaped like an OpenAI chat completion response."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def fake_client(create):
    """Fake AsyncOpenAI exposing only chat.completions.create."""
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


@pytest.fixture
def investor():
    return InvestorCriteria(
        id="inv-1",
        name="Dana Lee",
        email="dana@fund.vc",
        industries=["Healthcare", "Fintech"],
        stages=["Seed", "Series A"],
        check_size=CheckSize(min=1_000_000, max=3_000_000),
        geography=["US"],
    )


@pytest.fixture
def make_startup():
    def _make(id="s-1", **overrides):
        data = {
            "id": id,
            "name": f"Startup {id}",
            "industry": "Healthcare",
            "stage": "Seed",
            "raising": 2_000_000,
            "geography": "US",
            "description": "Clinical workflow software for small practices.",
            "metrics": StartupMetrics(arr=250_000, customers=40, growth="12% MoM"),
        }
        data.update(overrides)
        return StartupProfile(**data)
    return _make


@pytest.fixture
def good_client():
    """Client whose completions always echo a valid insight for the prompt's startup."""
    async def create(**kwargs):
        prompt = kwargs["messages"][0]["content"]
        name = prompt.split("STARTUP PROFILE:\n- Name: ", 1)[1].split("\n", 1)[0]
        return completion(json.dumps({
            "explanation": f"{name} fits your thesis.",
            "outreach": f"Hey {name}, I'd love a quick call about your round.",
        }))
    return fake_client(AsyncMock(side_effect=create))


@pytest.fixture
def failing_client():
    return fake_client(AsyncMock(side_effect=RuntimeError("service unavailable")))
