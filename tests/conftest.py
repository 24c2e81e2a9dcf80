"""Shared fixtures for the Insider Risk Index tests."""

from __future__ import annotations

import pytest

from insider_risk_index.catalog import QUESTIONS
from insider_risk_index.scoring import Answer


def answers_for(values_by_category: dict[str, float]) -> list[Answer]:
    """Answer every question in each listed category with the same value."""
    return [
        Answer(q.id, float(values_by_category[q.category_id]))
        for q in QUESTIONS
        if q.category_id in values_by_category
    ]


def uniform_answers(value: float) -> list[Answer]:
    return [Answer(q.id, float(value)) for q in QUESTIONS]


class FakeClock:
    """Deterministic clock for cache expiry tests."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# Scores 90 / 70 / 50 / 30 / 10 in catalog order
MIXED_VALUES = {
    "visibility": 90,
    "prevention-coaching": 70,
    "investigation-evidence": 50,
    "identity-saas": 30,
    "phishing-resilience": 10,
}
