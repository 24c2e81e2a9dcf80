"""
Benchmark resolver — Peer comparisons with fallback to the overall average.

Resolution never fails: an unknown or empty industry/size key resolves to the
overall average so every result carries three comparable numbers.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..catalog import (
    INDUSTRY_BENCHMARKS,
    OVERALL_BENCHMARK,
    get_industry_benchmark,
    get_size_benchmark,
)
from .models import BenchmarkComparison, Percentile

logger = logging.getLogger("insider_risk_index.scoring.benchmark")


def resolve_benchmarks(
    industry: Optional[str] = "",
    company_size: Optional[str] = "",
) -> BenchmarkComparison:
    overall = OVERALL_BENCHMARK.average_score

    industry_bm = get_industry_benchmark(industry)
    if industry_bm is None and industry:
        logger.debug(f"No industry benchmark for '{industry}', using overall average")

    size_bm = get_size_benchmark(company_size)
    if size_bm is None and company_size:
        logger.debug(f"No size benchmark for '{company_size}', using overall average")

    return BenchmarkComparison(
        industry=industry_bm.average_score if industry_bm else overall,
        company_size=size_bm.average_score if size_bm else overall,
        overall=overall,
    )


def _percentile(score: float, average: float) -> int:
    if average <= 0:
        return 0
    return round(min(100.0, max(0.0, score / average * 50)))


def calculate_percentile(
    score: float,
    industry: Optional[str] = "",
    company_size: Optional[str] = "",
) -> Percentile:
    """
    Approximate percentile against peer averages: the average itself sits at
    the 50th percentile and the scale is linear, capped to [0, 100].
    Industry and size percentiles are only reported when the key resolves.
    """
    result = Percentile(overall=_percentile(score, OVERALL_BENCHMARK.average_score))

    industry_bm = get_industry_benchmark(industry)
    if industry_bm:
        result.industry = _percentile(score, industry_bm.average_score)

    size_bm = get_size_benchmark(company_size)
    if size_bm:
        result.company_size = _percentile(score, size_bm.average_score)

    return result


def get_category_benchmark(
    category_id: str,
    industry: Optional[str] = "",
    company_size: Optional[str] = "",
) -> float:
    """
    Peer average for one category: industry table first, then size table,
    then the mean of that category across all industries.
    """
    for snapshot in (get_industry_benchmark(industry), get_size_benchmark(company_size)):
        if snapshot and category_id in snapshot.category_averages:
            return snapshot.category_averages[category_id]

    values = [
        s.category_averages[category_id]
        for s in INDUSTRY_BENCHMARKS.values()
        if category_id in s.category_averages
    ]
    if not values:
        return OVERALL_BENCHMARK.average_score
    return round(sum(values) / len(values), 2)
