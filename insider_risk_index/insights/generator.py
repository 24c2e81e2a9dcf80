"""
Insight generator — Strengths, weaknesses and recommendations from the
category breakdown.

Each category score falls into a bucket (high / medium / low) and phrases are
drawn from the tables in .phrases. Level, industry and size tables contribute
further recommendations. Lists are padded from fallback phrases up to the
configured minimums and truncated to the maximums, so they are never empty.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol, Sequence

from ..catalog import get_category, normalize_industry_key, normalize_size_key
from ..config import MEDIUM_STRENGTH_THRESHOLD, SCORE_BUCKETS, InsightConfig
from . import phrases

logger = logging.getLogger("insider_risk_index.insights")


class ScoredCategory(Protocol):
    category_id: str
    score: float


@dataclass
class Insights:
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "recommendations": list(self.recommendations),
        }


def score_bucket(score: float) -> str:
    for threshold, bucket in SCORE_BUCKETS:
        if score >= threshold:
            return bucket
    return SCORE_BUCKETS[-1][1]


def _extend_unique(target: list[str], candidates: Iterable[str], limit: int) -> None:
    for phrase in candidates:
        if len(target) >= limit:
            return
        if phrase and phrase not in target:
            target.append(phrase)


def generate_insights(
    category_scores: Sequence[ScoredCategory],
    level: int,
    total_score: float,
    industry: Optional[str] = "",
    company_size: Optional[str] = "",
    config: Optional[InsightConfig] = None,
) -> Insights:
    config = config or InsightConfig()
    known = [cs for cs in category_scores if cs.category_id in phrases.CATEGORY_PHRASES]

    # Stable sorts: ties keep catalog order
    highest_first = sorted(known, key=lambda cs: -cs.score)
    lowest_first = sorted(known, key=lambda cs: cs.score)

    strengths: list[str] = []
    for cs in highest_first:
        bucket = score_bucket(cs.score)
        table = phrases.CATEGORY_PHRASES[cs.category_id]
        if bucket == "high":
            strengths.extend(table["high"][:2])
        elif bucket == "medium" and cs.score >= MEDIUM_STRENGTH_THRESHOLD:
            strengths.append(table["medium"][0])

    weaknesses: list[str] = []
    for cs in lowest_first:
        bucket = score_bucket(cs.score)
        table = phrases.CATEGORY_PHRASES[cs.category_id]
        if bucket == "low":
            weaknesses.extend(table["low"][:2])
        elif bucket == "medium" and cs.score < MEDIUM_STRENGTH_THRESHOLD:
            weaknesses.append(table["medium"][1])

    recommendations: list[str] = []
    for cs in lowest_first:
        bucket = score_bucket(cs.score)
        recommendations.append(phrases.CATEGORY_RECOMMENDATIONS[cs.category_id][bucket])

    level_recs = phrases.LEVEL_RECOMMENDATIONS.get(level, [])
    recommendations.extend(level_recs[:config.level_recommendations])

    industry_recs = phrases.INDUSTRY_RECOMMENDATIONS.get(normalize_industry_key(industry), [])
    if industry_recs:
        recommendations.append(industry_recs[0])

    size_recs = phrases.SIZE_RECOMMENDATIONS.get(normalize_size_key(company_size), [])
    if size_recs:
        recommendations.append(size_recs[0])

    _pad_strengths(strengths, level, total_score, config.min_strengths)
    _pad_weaknesses(weaknesses, lowest_first, config.min_weaknesses)
    _extend_unique(recommendations, phrases.FALLBACK_RECOMMENDATIONS, config.min_recommendations)

    insights = Insights(
        strengths=_dedupe(strengths)[:config.max_strengths],
        weaknesses=_dedupe(weaknesses)[:config.max_weaknesses],
        recommendations=_dedupe(recommendations)[:config.max_recommendations],
    )
    logger.debug(
        f"Generated {len(insights.strengths)} strengths, {len(insights.weaknesses)} "
        f"weaknesses, {len(insights.recommendations)} recommendations"
    )
    return insights


def _pad_strengths(strengths: list[str], level: int, total_score: float, minimum: int) -> None:
    if not strengths:
        key = "established" if level >= 3 else "emerging"
        strengths.extend(phrases.FALLBACK_STRENGTHS[key])

    extra = [phrases.STRENGTH_LEVEL.format(level=level)]
    if round(total_score) > 50:
        extra.append(phrases.STRENGTH_OVERALL.format(score=round(total_score)))
    extra.extend(phrases.FALLBACK_STRENGTHS["emerging"])
    _extend_unique(strengths, extra, minimum)


def _pad_weaknesses(
    weaknesses: list[str],
    lowest_first: Sequence[ScoredCategory],
    minimum: int,
) -> None:
    extra: list[str] = []
    if not weaknesses and lowest_first:
        lowest = lowest_first[0]
        category = get_category(lowest.category_id)
        if category and score_bucket(lowest.score) != "high":
            extra.append(phrases.WEAKNESS_NEEDS_ENHANCEMENT.format(
                name=category.name, score=round(lowest.score)
            ))

    for cs in lowest_first[:3]:
        category = get_category(cs.category_id)
        if category:
            extra.append(phrases.WEAKNESS_OPPORTUNITY.format(name_lower=category.name.lower()))

    extra.extend(phrases.FALLBACK_WEAKNESSES)
    _extend_unique(weaknesses, extra, minimum)


def _dedupe(items: list[str]) -> list[str]:
    seen: set[str] = set()
    out = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out
