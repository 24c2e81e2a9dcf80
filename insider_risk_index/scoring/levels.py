"""
Risk level classifier — Maps a composite score onto five maturity levels.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RiskLevel:
    level: int
    name: str
    description: str
    low: float              # Inclusive lower bound of the listed range
    high: float             # Inclusive upper bound of the listed range
    color: str
    priority: str

    @property
    def range(self) -> tuple[float, float]:
        return (self.low, self.high)


RISK_LEVELS: tuple[RiskLevel, ...] = (
    RiskLevel(1, "Critical Risk",
              "Immediate action required. Significant gaps in insider risk management.",
              0, 20, "#DC2626", "urgent"),
    RiskLevel(2, "High Risk",
              "Major vulnerabilities present. Comprehensive improvements needed.",
              21, 40, "#EA580C", "high"),
    RiskLevel(3, "Moderate Risk",
              "Some gaps identified. Targeted improvements recommended.",
              41, 60, "#D97706", "medium"),
    RiskLevel(4, "Low Risk",
              "Good baseline security. Minor enhancements suggested.",
              61, 80, "#16A34A", "low"),
    RiskLevel(5, "Minimal Risk",
              "Excellent insider risk management. Maintain current practices.",
              81, 100, "#059669", "maintenance"),
)


def classify_risk_level(score: float) -> RiskLevel:
    """
    Return the level whose range owns `score`.

    Each level owns everything up to and including its upper bound, so a
    fractional score in the gap between two listed ranges (20.5) belongs to
    the higher level. Scores outside [0, 100] clamp to level 1 or 5.
    """
    # Gap scores go up a level; a lookup by listed range alone would drop them to level 1
    for level in RISK_LEVELS:
        if score <= level.high:
            return level
    return RISK_LEVELS[-1]


def get_risk_level(level: int) -> RiskLevel:
    """Look up a level by number, clamped into 1-5."""
    index = max(1, min(len(RISK_LEVELS), int(level))) - 1
    return RISK_LEVELS[index]
