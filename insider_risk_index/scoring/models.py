"""
Scoring data models — Structured types for engine input and output.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Optional

from ..errors import AnswerFormatError


@dataclass(frozen=True)
class Answer:
    """One submitted answer. Values are expected to match an option value."""
    question_id: str
    value: float
    rationale: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict, index: Optional[int] = None) -> "Answer":
        """Build from `{questionId|question_id, value, rationale?}`."""
        if not isinstance(data, dict):
            raise AnswerFormatError(
                f"expected an object, got {type(data).__name__}", index
            )
        question_id = data.get("questionId", data.get("question_id"))
        if not question_id or not isinstance(question_id, str):
            raise AnswerFormatError("missing question id", index)
        value = data.get("value")
        if (isinstance(value, bool) or not isinstance(value, (int, float))
                or not math.isfinite(value)):
            raise AnswerFormatError(
                f"value for '{question_id}' must be a finite number, got {value!r}", index
            )
        rationale = data.get("rationale")
        return cls(question_id=question_id, value=float(value), rationale=rationale)

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"questionId": self.question_id, "value": self.value}
        if self.rationale:
            data["rationale"] = self.rationale
        return data


@dataclass
class CompletenessReport:
    """Answer Validator output. Incompleteness is reported, never raised."""
    is_complete: bool = True
    missing_questions: list[str] = field(default_factory=list)
    unknown_questions: list[str] = field(default_factory=list)
    out_of_range: list[str] = field(default_factory=list)
    off_option: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "isComplete": self.is_complete,
            "missingQuestions": list(self.missing_questions),
            "unknownQuestions": list(self.unknown_questions),
            "outOfRange": list(self.out_of_range),
            "offOption": list(self.off_option),
        }


@dataclass
class CategoryScore:
    """Normalized score for a single category."""
    category_id: str
    score: float = 0.0
    weight: float = 0.0
    contribution: float = 0.0          # round(score * weight, 2)
    max_score: float = 100.0
    answered: int = 0
    total: int = 0

    def to_dict(self) -> dict:
        return {
            "pillarId": self.category_id,
            "score": self.score,
            "maxScore": self.max_score,
            "weight": self.weight,
            "contributionToTotal": self.contribution,
            "answeredQuestions": self.answered,
            "totalQuestions": self.total,
        }


@dataclass(frozen=True)
class BenchmarkComparison:
    industry: float
    company_size: float
    overall: float

    def to_dict(self) -> dict:
        return {
            "industry": self.industry,
            "companySize": self.company_size,
            "overall": self.overall,
        }


@dataclass
class Percentile:
    overall: int = 0
    industry: Optional[int] = None
    company_size: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "overall": self.overall,
            "industry": self.industry,
            "companySize": self.company_size,
        }


@dataclass
class AssessmentResult:
    """Complete scoring result for one assessment."""
    total_score: float = 0.0
    level: int = 1
    level_name: str = ""
    level_description: str = ""
    category_scores: list[CategoryScore] = field(default_factory=list)
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    benchmark: BenchmarkComparison = field(
        default_factory=lambda: BenchmarkComparison(0.0, 0.0, 0.0)
    )
    percentile: Percentile = field(default_factory=Percentile)
    completeness: CompletenessReport = field(default_factory=CompletenessReport)

    def category_score(self, category_id: str) -> Optional[CategoryScore]:
        for cs in self.category_scores:
            if cs.category_id == category_id:
                return cs
        return None

    @property
    def strongest_category(self) -> Optional[CategoryScore]:
        if not self.category_scores:
            return None
        return max(self.category_scores, key=lambda cs: cs.score)

    @property
    def weakest_category(self) -> Optional[CategoryScore]:
        if not self.category_scores:
            return None
        return min(self.category_scores, key=lambda cs: cs.score)

    def to_dict(self) -> dict:
        return {
            "totalScore": self.total_score,
            "level": self.level,
            "levelName": self.level_name,
            "levelDescription": self.level_description,
            "pillarBreakdown": [cs.to_dict() for cs in self.category_scores],
            "recommendations": list(self.recommendations),
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "benchmark": self.benchmark.to_dict(),
            "percentile": self.percentile.to_dict(),
            "completeness": self.completeness.to_dict(),
        }
