"""
Tests for the static catalogs: categories, questions and benchmark tables.

Run: pytest tests/test_catalog.py -v
"""

from __future__ import annotations

import pytest

from insider_risk_index.catalog import (
    CAPABILITY_BONUS_RULES,
    CATEGORIES,
    INDUSTRY_BENCHMARKS,
    OVERALL_BENCHMARK,
    QUESTIONS,
    SIZE_BENCHMARKS,
    Category,
    get_category,
    get_category_color,
    get_category_weight,
    get_industry_benchmark,
    get_question,
    get_questions_by_category,
    get_questions_grouped_by_category,
    get_size_benchmark,
    normalize_industry_key,
    normalize_size_key,
    validate_catalog,
)
from insider_risk_index.errors import CatalogError


def test_category_weights_sum_to_one():
    assert abs(sum(c.weight for c in CATEGORIES) - 1.0) < 1e-9
    validate_catalog()


def test_category_weights_match_catalog():
    assert get_category_weight("visibility") == 0.25
    assert get_category_weight("prevention-coaching") == 0.25
    assert get_category_weight("investigation-evidence") == 0.20
    assert get_category_weight("identity-saas") == 0.15
    assert get_category_weight("phishing-resilience") == 0.15
    assert get_category_weight("unknown") == 0.0


def test_validate_catalog_rejects_bad_weights():
    bad = (
        Category("a", "A", "", 0.6),
        Category("b", "B", "", 0.6),
    )
    with pytest.raises(CatalogError):
        validate_catalog(bad)


def test_validate_catalog_rejects_duplicate_ids():
    dup = (
        Category("a", "A", "", 0.5),
        Category("a", "A again", "", 0.5),
    )
    with pytest.raises(CatalogError):
        validate_catalog(dup)


def test_twenty_questions_four_per_category():
    assert len(QUESTIONS) == 20
    grouped = get_questions_grouped_by_category()
    assert set(grouped) == {c.id for c in CATEGORIES}
    for category in CATEGORIES:
        assert len(get_questions_by_category(category.id)) == 4


def test_question_ids_unique_and_bound_to_known_categories():
    ids = [q.id for q in QUESTIONS]
    assert len(ids) == len(set(ids))
    for q in QUESTIONS:
        assert get_category(q.category_id) is not None


def test_question_options_are_ordered_zero_to_hundred():
    for q in QUESTIONS:
        values = [o.value for o in q.options]
        assert values == sorted(values)
        assert values[0] == 0 and values[-1] == 100
        assert q.weight > 0


def test_option_lookup():
    q = get_question("v1")
    assert q is not None
    assert q.option_for(100).label == "Excellent coverage"
    assert q.option_for(42) is None
    assert get_question("nope") is None


def test_capability_bonus_rules_reference_real_questions():
    for question_id, rule in CAPABILITY_BONUS_RULES.items():
        assert get_question(question_id) is not None
        assert rule.applies(75)
        assert not rule.applies(100)
        assert not rule.applies(50)


def test_benchmark_tables():
    assert OVERALL_BENCHMARK.average_score == 64.2
    assert sum(OVERALL_BENCHMARK.distribution.values()) == 100
    assert INDUSTRY_BENCHMARKS["financial-services"].average_score == 74
    assert SIZE_BENCHMARKS["5000+"].average_score == 79
    for snapshot in list(INDUSTRY_BENCHMARKS.values()) + list(SIZE_BENCHMARKS.values()):
        assert set(snapshot.category_averages) == {c.id for c in CATEGORIES}


def test_benchmark_tables_are_read_only():
    with pytest.raises(TypeError):
        INDUSTRY_BENCHMARKS["new"] = INDUSTRY_BENCHMARKS["retail"]


def test_key_normalization():
    assert normalize_industry_key("FINANCIAL_SERVICES") == "financial-services"
    assert normalize_industry_key("Financial Services") == "financial-services"
    assert normalize_industry_key("") == ""
    assert normalize_size_key("STARTUP_1_50") == "1-50"
    assert normalize_size_key("ENTERPRISE_5000_PLUS") == "5000+"
    assert normalize_size_key("201-1000") == "201-1000"


def test_benchmark_lookup_by_either_key_form():
    assert get_industry_benchmark("HEALTHCARE") is INDUSTRY_BENCHMARKS["healthcare"]
    assert get_size_benchmark("MEDIUM_201_1000") is SIZE_BENCHMARKS["201-1000"]
    assert get_industry_benchmark("space-mining") is None
    assert get_size_benchmark(None) is None


def test_submission_size_enums_resolve():
    assert normalize_size_key("SMALL_51_250") == "51-200"
    assert normalize_size_key("MID_251_1000") == "201-1000"
    assert normalize_size_key("MEDIUM_201_1000") == "201-1000"
    assert get_size_benchmark("251-1000") is SIZE_BENCHMARKS["201-1000"]


def test_category_colors():
    assert get_category_color("visibility") == "#3B82F6"
    assert get_category_color("unknown") == "#6B7280"
