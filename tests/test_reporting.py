"""
Tests for the JSON export and the Markdown summary.

Run: pytest tests/test_reporting.py -v
"""

from __future__ import annotations

import json

from insider_risk_index.reporting import export_json, export_summary, render_summary
from insider_risk_index.scoring import calculate_insider_risk_index

from conftest import MIXED_VALUES, answers_for


def _result():
    return calculate_insider_risk_index(answers_for(MIXED_VALUES), "healthcare", "51-200")


def test_export_json(tmp_path):
    path = export_json(_result(), tmp_path / "out", "abc123")
    assert path.name == "insider_risk_assessment_abc123.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["metadata"]["assessment_id"] == "abc123"
    assert data["assessment"]["totalScore"] == 56.0
    assert data["assessment"]["level"] == 3
    assert [c["id"] for c in data["categories"]][0] == "visibility"
    assert data["categories"][0]["name"] == "Visibility"
    assert data["categories"][0]["color"] == "#3B82F6"


def test_render_summary_content():
    result = _result()
    text = render_summary(result, "HEALTHCARE", "SMALL_51_200", "abc123")
    assert "# Insider Risk Index Assessment Summary" in text
    assert "56.0/100" in text
    assert "Risk Level 3: Moderate Risk" in text
    assert "below the industry average of 64.2%" in text
    assert "Strongest area: Visibility" in text
    assert "**Industry:** healthcare" in text
    for rec in result.recommendations[:3]:
        assert f"- {rec}" in text
    assert "1. Review detailed findings in the comprehensive report" in text
    assert "question(s) were not answered" not in text


def test_summary_notes_incomplete_submission():
    result = calculate_insider_risk_index(answers_for({"visibility": 80}))
    text = render_summary(result)
    assert "16 question(s) were not answered" in text
    assert "not specified" in text


def test_export_summary_writes_file(tmp_path):
    path = export_summary(_result(), tmp_path, "abc123", "healthcare", "51-200")
    assert path.name == "insider_risk_summary_abc123.md"
    assert "Category Breakdown" in path.read_text(encoding="utf-8")
