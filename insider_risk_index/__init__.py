"""
Insider Risk Index
==================
Scoring and benchmarking engine for the insider-risk maturity assessment.
Turns questionnaire answers plus organisational context into a composite
0-100 Index, a maturity level, a per-category breakdown, peer benchmarks
and prioritised insights.

The scoring core is pure: no I/O, no shared mutable state.
"""

__version__ = "1.0.0"
__author__ = "Insider Risk Index"

from .scoring import calculate_insider_risk_index, AssessmentResult, Answer

__all__ = [
    "calculate_insider_risk_index",
    "AssessmentResult",
    "Answer",
    "__version__",
]
