"""
Configuration module for the Insider Risk Index engine.
Defines tunable scoring parameters, enrichment feed settings and output options.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path


# ─── Scoring ────────────────────────────────────────────────────────────────

MAX_OPTION_VALUE = 100.0          # Highest option value on every question
MIN_OPTION_VALUE = 0.0
SCORE_PRECISION = 2               # Decimal places for category/composite scores
WEIGHT_TOLERANCE = 1e-9           # Category weights must sum to 1.0 within this


@dataclass
class ScoringConfig:
    """Controls for the scoring path."""
    capability_bonus: bool = False        # Apply CAPABILITY_BONUS_RULES before aggregation
    clamp_out_of_range: bool = True       # Boundary clamps values to [0, 100] before scoring


# ─── Insights ───────────────────────────────────────────────────────────────

# Lower bound (inclusive) of each score bucket, highest first
SCORE_BUCKETS = [
    (70.0, "high"),
    (40.0, "medium"),
    (0.0,  "low"),
]

# Medium-bucket split: at or above → strength phrase, below → weakness phrase
MEDIUM_STRENGTH_THRESHOLD = 55.0


@dataclass
class InsightConfig:
    """Minimum and maximum list sizes for generated insights."""
    min_strengths: int = 3
    min_weaknesses: int = 3
    min_recommendations: int = 5
    max_strengths: int = 3
    max_weaknesses: int = 3
    max_recommendations: int = 5
    level_recommendations: int = 2        # Taken from the level table per result


# ─── Threat Matrix Enrichment ───────────────────────────────────────────────

MATRIX_API_URL = os.environ.get(
    "MATRIX_API_URL",
    "https://raw.githubusercontent.com/forscie/insider-threat-matrix/refs/heads/main/insider-threat-matrix.json",
)
MATRIX_USER_AGENT = "InsiderRiskIndex/1.0"

MAX_RETRIES = 3                   # Retry count for throttled/unavailable responses
INITIAL_BACKOFF_SECONDS = 1.0
MAX_BACKOFF_SECONDS = 30.0
BACKOFF_MULTIPLIER = 2.0


@dataclass
class MatrixConfig:
    """Settings for the optional threat matrix collaborator."""
    url: str = MATRIX_API_URL
    enabled: bool = True
    cache_ttl_hours: int = 24
    timeout_seconds: float = 30.0
    max_retries: int = MAX_RETRIES
    max_category_recommendations: int = 5


# ─── Output Configuration ───────────────────────────────────────────────────

@dataclass
class OutputConfig:
    """Output directory and format settings."""
    base_dir: str = ""
    timestamp: str = ""
    formats: list[str] = field(default_factory=lambda: ["json", "markdown"])

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        if not self.base_dir:
            self.base_dir = os.path.join(
                os.getcwd(),
                f"insider_risk_assessment_{self.timestamp}",
            )

    @property
    def output_dir(self) -> Path:
        return Path(self.base_dir)

    @property
    def cache_dir(self) -> Path:
        return self.output_dir / ".cache"


# ─── Master Configuration ───────────────────────────────────────────────────

@dataclass
class EngineConfig:
    """Top-level configuration for the entire engine."""
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    insights: InsightConfig = field(default_factory=InsightConfig)
    matrix: MatrixConfig = field(default_factory=MatrixConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    verbose: bool = False

    @classmethod
    def from_file(cls, path: str | Path) -> "EngineConfig":
        """Load configuration from a JSON file. Unknown keys are ignored."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        config = cls()
        for section in ("scoring", "insights", "matrix", "output"):
            if section not in data:
                continue
            target = getattr(config, section)
            for k, v in data[section].items():
                if hasattr(target, k):
                    setattr(target, k, v)
        config.verbose = data.get("verbose", False)
        return config
