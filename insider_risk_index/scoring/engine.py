"""
Scoring Engine — Computes the 0-100 Insider Risk Index from assessment answers.

Scoring model:
  - Each category is scored from its answered questions only:
        score = Σ(value × weight) / Σ(100 × weight) × 100
    An unanswered category scores 0.
  - Category scores are weighted by the category weights (summing to 1.0)
    and combined into the composite Index.
  - The composite is classified into one of five maturity levels.
  - Benchmarks and insights are merged into the same result.

The engine is pure: it reads only the immutable catalogs and allocates a new
result per call.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Sequence

from ..catalog import (
    CAPABILITY_BONUS_RULES,
    CATEGORIES,
    QUESTIONS,
    CapabilityBonus,
    Category,
    Question,
)
from ..config import MAX_OPTION_VALUE, SCORE_PRECISION, EngineConfig, ScoringConfig
from ..insights import generate_insights
from .benchmark import calculate_percentile, resolve_benchmarks
from .levels import classify_risk_level
from .models import Answer, AssessmentResult, CategoryScore
from .validator import check_completeness

logger = logging.getLogger("insider_risk_index.scoring")


def apply_capability_bonus(
    answer_map: Mapping[str, Answer],
    rules: Mapping[str, CapabilityBonus] = CAPABILITY_BONUS_RULES,
) -> dict[str, Answer]:
    """Return a copy of `answer_map` with bonus points added where a rule applies."""
    adjusted = dict(answer_map)
    for question_id, rule in rules.items():
        answer = adjusted.get(question_id)
        if answer is None or not rule.applies(answer.value):
            continue
        boosted = min(MAX_OPTION_VALUE, answer.value + rule.points)
        logger.debug(f"Capability bonus '{rule.marker}' on {question_id}: "
                     f"{answer.value} → {boosted}")
        adjusted[question_id] = Answer(question_id, boosted, answer.rationale)
    return adjusted


def aggregate_category(
    category: Category,
    questions: Sequence[Question],
    answer_map: Mapping[str, Answer],
) -> CategoryScore:
    """Score one category from the answers to its questions."""
    cs = CategoryScore(category_id=category.id, weight=category.weight)
    weighted_sum = 0.0
    weighted_max = 0.0

    for question in questions:
        if question.category_id != category.id:
            continue
        cs.total += 1
        answer = answer_map.get(question.id)
        if answer is None:
            continue
        weighted_sum += answer.value * question.weight
        weighted_max += MAX_OPTION_VALUE * question.weight
        cs.answered += 1

    normalized = (weighted_sum / weighted_max) * 100 if weighted_max > 0 else 0.0
    cs.score = round(normalized, SCORE_PRECISION)
    cs.contribution = round(cs.score * category.weight, SCORE_PRECISION)
    return cs


def compute_composite(category_scores: Iterable[CategoryScore]) -> float:
    """Σ(category score × category weight), rounded."""
    total = sum(cs.score * cs.weight for cs in category_scores)
    return round(total, SCORE_PRECISION)


def score_categories(
    answers: Iterable[Answer],
    config: Optional[ScoringConfig] = None,
    categories: Sequence[Category] = CATEGORIES,
    questions: Sequence[Question] = QUESTIONS,
) -> list[CategoryScore]:
    """
    One CategoryScore per category, in catalog order. Answers to unknown
    questions are ignored; for repeated question ids the last answer wins.
    """
    config = config or ScoringConfig()
    known_ids = {q.id for q in questions}

    answer_map: dict[str, Answer] = {}
    for answer in answers:
        if answer.question_id not in known_ids:
            logger.debug(f"Ignoring answer for unknown question '{answer.question_id}'")
            continue
        answer_map[answer.question_id] = answer

    if config.capability_bonus:
        answer_map = apply_capability_bonus(answer_map)

    return [aggregate_category(c, questions, answer_map) for c in categories]


def calculate_insider_risk_index(
    answers: Iterable[Answer],
    industry: Optional[str] = "",
    company_size: Optional[str] = "",
    config: Optional[EngineConfig] = None,
) -> AssessmentResult:
    """
    Compute the full assessment result.

    Args:
        answers: Submitted answers; partial submissions are scored, not rejected.
        industry: Industry key (slug or enum form); may be empty.
        company_size: Size bracket key (slug or enum form); may be empty.
        config: Engine configuration; defaults apply when omitted.

    Returns:
        AssessmentResult with composite score, level, breakdown, benchmarks
        and insights. Always fully populated.
    """
    config = config or EngineConfig()
    answers = list(answers)

    result = AssessmentResult()
    result.completeness = check_completeness(answers)

    # --- Per-category scores ---
    result.category_scores = score_categories(answers, config.scoring)

    # --- Composite Index ---
    result.total_score = compute_composite(result.category_scores)

    # --- Maturity level ---
    risk_level = classify_risk_level(result.total_score)
    result.level = risk_level.level
    result.level_name = risk_level.name
    result.level_description = risk_level.description

    # --- Benchmarks ---
    result.benchmark = resolve_benchmarks(industry, company_size)
    result.percentile = calculate_percentile(result.total_score, industry, company_size)

    # --- Insights ---
    insights = generate_insights(
        result.category_scores,
        level=result.level,
        total_score=result.total_score,
        industry=industry,
        company_size=company_size,
        config=config.insights,
    )
    result.strengths = insights.strengths
    result.weaknesses = insights.weaknesses
    result.recommendations = insights.recommendations

    logger.info(
        f"Scored assessment: {result.total_score:.2f}/100 "
        f"(level {result.level}, {len(answers)} answers, "
        f"{len(result.completeness.missing_questions)} missing)"
    )
    return result
