"""Catalog package — static categories, questions and benchmark tables."""

from .categories import (
    CATEGORIES,
    Category,
    get_category,
    get_category_color,
    get_category_weight,
    validate_catalog,
)
from .questions import (
    QUESTIONS,
    CAPABILITY_BONUS_RULES,
    AnswerOption,
    CapabilityBonus,
    Question,
    get_question,
    get_questions_by_category,
    get_questions_grouped_by_category,
)
from .benchmarks import (
    INDUSTRY_BENCHMARKS,
    SIZE_BENCHMARKS,
    OVERALL_BENCHMARK,
    BenchmarkSnapshot,
    OverallBenchmark,
    get_industry_benchmark,
    get_size_benchmark,
    normalize_industry_key,
    normalize_size_key,
)

__all__ = [
    "CATEGORIES",
    "Category",
    "get_category",
    "get_category_color",
    "get_category_weight",
    "validate_catalog",
    "QUESTIONS",
    "CAPABILITY_BONUS_RULES",
    "AnswerOption",
    "CapabilityBonus",
    "Question",
    "get_question",
    "get_questions_by_category",
    "get_questions_grouped_by_category",
    "INDUSTRY_BENCHMARKS",
    "SIZE_BENCHMARKS",
    "OVERALL_BENCHMARK",
    "BenchmarkSnapshot",
    "OverallBenchmark",
    "get_industry_benchmark",
    "get_size_benchmark",
    "normalize_industry_key",
    "normalize_size_key",
]
