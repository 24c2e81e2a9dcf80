"""Scoring package — Index calculation, maturity levels and benchmarks."""

from .engine import (
    aggregate_category,
    apply_capability_bonus,
    calculate_insider_risk_index,
    compute_composite,
    score_categories,
)
from .models import (
    Answer,
    AssessmentResult,
    BenchmarkComparison,
    CategoryScore,
    CompletenessReport,
    Percentile,
)
from .levels import RISK_LEVELS, RiskLevel, classify_risk_level, get_risk_level
from .benchmark import calculate_percentile, get_category_benchmark, resolve_benchmarks
from .validator import check_completeness, clamp_answers, load_answers

__all__ = [
    "aggregate_category",
    "apply_capability_bonus",
    "calculate_insider_risk_index",
    "compute_composite",
    "score_categories",
    "Answer",
    "AssessmentResult",
    "BenchmarkComparison",
    "CategoryScore",
    "CompletenessReport",
    "Percentile",
    "RISK_LEVELS",
    "RiskLevel",
    "classify_risk_level",
    "get_risk_level",
    "calculate_percentile",
    "get_category_benchmark",
    "resolve_benchmarks",
    "check_completeness",
    "clamp_answers",
    "load_answers",
]
