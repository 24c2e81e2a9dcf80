"""Insights package — rule-table driven narrative generation."""

from .generator import Insights, generate_insights, score_bucket

__all__ = ["Insights", "generate_insights", "score_bucket"]
