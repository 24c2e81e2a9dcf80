"""
Benchmark tables — Peer averages by industry, by company size and overall.

Sources: Ponemon Institute 2024/2025 Cost of Insider Threats Global Report,
Verizon 2024 DBIR, Gartner Market Guide for Insider Risk Management
(G00805757, March 2024).

The tables are keyed by slug ("financial-services", "1-50"). The submission
layer uses enum-style keys ("FINANCIAL_SERVICES", "STARTUP_1_50");
normalize_industry_key() / normalize_size_key() map both forms to the slug.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class BenchmarkSnapshot:
    """Peer averages for one industry or size bracket."""
    key: str
    name: str
    average_score: float
    category_averages: Mapping[str, float] = field(default_factory=dict)
    sample_size: int = 0
    average_cost_per_incident: int = 0
    avg_containment_days: int = 0


@dataclass(frozen=True)
class OverallBenchmark:
    average_score: float
    total_assessments: int
    average_cost_per_incident: int
    average_annual_cost: int
    avg_containment_days: int
    avg_incidents_per_year: float
    last_updated: str
    distribution: Mapping[int, int]      # Percent of assessments per maturity level


def _snapshot(key, name, average, averages, sample, cost, days) -> BenchmarkSnapshot:
    return BenchmarkSnapshot(
        key=key,
        name=name,
        average_score=float(average),
        category_averages=MappingProxyType(dict(zip(_CATEGORY_ORDER, map(float, averages)))),
        sample_size=sample,
        average_cost_per_incident=cost,
        avg_containment_days=days,
    )


# Column order for the per-category averages below
_CATEGORY_ORDER = (
    "visibility",
    "prevention-coaching",
    "investigation-evidence",
    "identity-saas",
    "phishing-resilience",
)


# ---------------------------------------------------------------------------
# Industry benchmarks
# ---------------------------------------------------------------------------
INDUSTRY_BENCHMARKS: Mapping[str, BenchmarkSnapshot] = MappingProxyType({
    s.key: s for s in (
        _snapshot("financial-services", "Financial Services", 74, (78, 71, 82, 76, 73), 3280, 758000, 76),
        _snapshot("healthcare",         "Healthcare",         58, (54, 52, 62, 56, 64), 2890, 892000, 89),
        _snapshot("technology",         "Technology",         79, (82, 76, 81, 85, 74), 2140, 634000, 68),
        _snapshot("manufacturing",      "Manufacturing",      61, (59, 56, 64, 61, 65), 1560, 687000, 84),
        _snapshot("retail",             "Retail",             64, (62, 60, 67, 65, 68), 1840, 623000, 79),
        _snapshot("government",         "Government",         72, (75, 69, 78, 71, 73),  980, 712000, 73),
        _snapshot("education",          "Education",          56, (53, 51, 59, 57, 61), 1240, 542000, 91),
        _snapshot("non-profit",         "Non-Profit",         52, (49, 47, 55, 51, 58),  680, 458000, 96),
    )
})


# ---------------------------------------------------------------------------
# Company size benchmarks
# ---------------------------------------------------------------------------
SIZE_BENCHMARKS: Mapping[str, BenchmarkSnapshot] = MappingProxyType({
    s.key: s for s in (
        _snapshot("1-50",      "1-50 employees",        48, (44, 42, 51, 46, 57), 4230, 423000, 104),
        _snapshot("51-200",    "51-200 employees",      58, (55, 53, 61, 57, 63), 3870, 534000, 91),
        _snapshot("201-1000",  "201-1,000 employees",   66, (63, 62, 69, 67, 67), 2940, 648000, 83),
        _snapshot("1001-5000", "1,001-5,000 employees", 73, (72, 70, 76, 75, 70), 1890, 743000, 76),
        _snapshot("5000+",     "5,000+ employees",      79, (81, 77, 83, 84, 75), 1240, 892000, 68),
    )
})


OVERALL_BENCHMARK = OverallBenchmark(
    average_score=64.2,
    total_assessments=14170,
    average_cost_per_incident=676517,
    average_annual_cost=17400000,
    avg_containment_days=81,
    avg_incidents_per_year=13.5,
    last_updated="2025-01-15",
    distribution=MappingProxyType({1: 16, 2: 24, 3: 34, 4: 21, 5: 5}),
)


# ---------------------------------------------------------------------------
# Key normalization
# ---------------------------------------------------------------------------
# Submission-layer enums, including the 51-250 / 251-1000 bracket variants
SIZE_KEY_ALIASES: Mapping[str, str] = MappingProxyType({
    "startup-1-50": "1-50",
    "small-51-200": "51-200",
    "small-51-250": "51-200",
    "51-250": "51-200",
    "medium-201-1000": "201-1000",
    "mid-251-1000": "201-1000",
    "251-1000": "201-1000",
    "large-1001-5000": "1001-5000",
    "enterprise-5000-plus": "5000+",
})


def _slug(key: Optional[str]) -> str:
    return (key or "").strip().lower().replace("_", "-").replace(" ", "-")


def normalize_industry_key(industry: Optional[str]) -> str:
    """'FINANCIAL_SERVICES' / 'Financial Services' → 'financial-services'."""
    return _slug(industry)


def normalize_size_key(company_size: Optional[str]) -> str:
    """'STARTUP_1_50' → '1-50', 'ENTERPRISE_5000_PLUS' → '5000+'."""
    slug = _slug(company_size)
    return SIZE_KEY_ALIASES.get(slug, slug)


def get_industry_benchmark(industry: Optional[str]) -> Optional[BenchmarkSnapshot]:
    return INDUSTRY_BENCHMARKS.get(normalize_industry_key(industry))


def get_size_benchmark(company_size: Optional[str]) -> Optional[BenchmarkSnapshot]:
    return SIZE_BENCHMARKS.get(normalize_size_key(company_size))
