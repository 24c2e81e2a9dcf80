"""
Tests for strengths, weaknesses and recommendations generation.

Run: pytest tests/test_insights.py -v
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from insider_risk_index.catalog import CATEGORIES
from insider_risk_index.config import InsightConfig
from insider_risk_index.insights import generate_insights, score_bucket
from insider_risk_index.insights import phrases


@dataclass
class Scored:
    category_id: str
    score: float


def _scores(*values: float) -> list[Scored]:
    return [Scored(c.id, v) for c, v in zip(CATEGORIES, values)]


@pytest.mark.parametrize("score,bucket", [
    (100, "high"), (70, "high"), (69.99, "medium"), (40, "medium"), (39.99, "low"), (0, "low"),
])
def test_score_buckets(score, bucket):
    assert score_bucket(score) == bucket


@pytest.mark.parametrize("values,level", [
    ((0, 0, 0, 0, 0), 1),
    ((50, 50, 50, 50, 50), 3),
    ((100, 100, 100, 100, 100), 5),
    ((90, 70, 50, 30, 10), 3),
    ((72, 72, 72, 72, 72), 4),
])
def test_lists_are_bounded_and_never_empty(values, level):
    insights = generate_insights(_scores(*values), level=level, total_score=sum(values) / 5)
    assert 1 <= len(insights.strengths) <= 3
    assert 1 <= len(insights.weaknesses) <= 3
    assert 1 <= len(insights.recommendations) <= 5
    for items in (insights.strengths, insights.weaknesses, insights.recommendations):
        assert len(items) == len(set(items))


def test_high_category_contributes_strengths():
    insights = generate_insights(_scores(95, 10, 10, 10, 10), level=2, total_score=31.25)
    assert insights.strengths[:2] == phrases.CATEGORY_PHRASES["visibility"]["high"][:2]


def test_low_categories_contribute_weaknesses_lowest_first():
    insights = generate_insights(_scores(80, 80, 80, 80, 5), level=4, total_score=68.75)
    assert insights.weaknesses[:2] == phrases.CATEGORY_PHRASES["phishing-resilience"]["low"][:2]


def test_recommendations_rank_lowest_category_first():
    insights = generate_insights(_scores(90, 70, 50, 30, 10), level=3, total_score=56.0)
    assert insights.recommendations[0] == (
        phrases.CATEGORY_RECOMMENDATIONS["phishing-resilience"]["low"]
    )
    assert insights.recommendations[1] == (
        phrases.CATEGORY_RECOMMENDATIONS["identity-saas"]["low"]
    )


def test_industry_and_size_recommendations_included_when_room():
    config = InsightConfig(max_recommendations=20)
    insights = generate_insights(
        _scores(50, 50, 50, 50, 50), level=3, total_score=50,
        industry="FINANCIAL_SERVICES", company_size="STARTUP_1_50", config=config,
    )
    assert phrases.INDUSTRY_RECOMMENDATIONS["financial-services"][0] in insights.recommendations
    assert phrases.SIZE_RECOMMENDATIONS["1-50"][0] in insights.recommendations


def test_all_high_pads_weaknesses_without_needs_enhancement():
    insights = generate_insights(_scores(100, 100, 100, 100, 100), level=5, total_score=100)
    assert len(insights.weaknesses) == 3
    assert not any("need enhancement" in w for w in insights.weaknesses)


def test_all_zero_pads_strengths_from_emerging_set():
    insights = generate_insights(_scores(0, 0, 0, 0, 0), level=1, total_score=0)
    assert insights.strengths[0] == phrases.FALLBACK_STRENGTHS["emerging"][0]


def test_unknown_categories_are_skipped():
    insights = generate_insights([Scored("mystery", 10)], level=1, total_score=10)
    assert insights.strengths and insights.weaknesses and insights.recommendations


def test_phrase_tables_cover_every_category():
    for category in CATEGORIES:
        assert set(phrases.CATEGORY_PHRASES[category.id]) == {"high", "medium", "low"}
        assert set(phrases.CATEGORY_RECOMMENDATIONS[category.id]) == {"high", "medium", "low"}
    assert set(phrases.LEVEL_RECOMMENDATIONS) == {1, 2, 3, 4, 5}
