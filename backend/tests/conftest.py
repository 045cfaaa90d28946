from __future__ import annotations

import pytest

from pte_scoring.scoring.engine import ScoringEngine
from pte_scoring.scoring.models import Passage
from pte_scoring.settings import settings


GOOD_SUMMARY = (
    "Increasing youth joblessness is a serious problem across Europe; however, although government "
    "training programmes exist, experts conclude that long-term investment in education is the most "
    "sustainable solution."
)


@pytest.fixture(autouse=True)
def _no_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests on the local path unless a test opts in."""
    monkeypatch.setattr(settings, "anthropic_api_key", None)


@pytest.fixture
def passage() -> Passage:
    return Passage.model_validate(
        {
            "text": (
                "Youth unemployment has risen sharply across Europe over the past decade. "
                "Although governments have introduced training programmes, many young people "
                "still struggle to find stable work. Experts conclude that long-term investment "
                "in education is the only sustainable solution."
            ),
            "keyElements": {
                "topic": "rising youth unemployment rates",
                "pivot": "government training programmes have had limited success",
                "conclusion": "long-term investment in education is the sustainable solution",
            },
        }
    )


@pytest.fixture
def good_summary() -> str:
    return GOOD_SUMMARY


@pytest.fixture
def engine() -> ScoringEngine:
    return ScoringEngine()
