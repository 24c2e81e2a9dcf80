"""
Tests for answer parsing, completeness reporting and boundary clamping.

Run: pytest tests/test_validator.py -v
"""

from __future__ import annotations

import json

import pytest

from insider_risk_index.catalog import QUESTIONS
from insider_risk_index.errors import AnswerFormatError
from insider_risk_index.scoring import Answer, check_completeness, clamp_answers, load_answers

from conftest import uniform_answers


# -- Parsing --

def test_load_answers_from_list():
    answers = load_answers([
        {"questionId": "v1", "value": 75},
        {"question_id": "v2", "value": 50, "rationale": "partial rollout"},
    ])
    assert answers == [Answer("v1", 75.0), Answer("v2", 50.0, "partial rollout")]


def test_load_answers_from_mapping_and_wrapper():
    assert load_answers({"v1": 25}) == [Answer("v1", 25.0)]
    assert load_answers({"answers": {"v1": 25}}) == [Answer("v1", 25.0)]
    assert load_answers({"answers": [{"questionId": "v1", "value": 25}]}) == [Answer("v1", 25.0)]


@pytest.mark.parametrize("payload", [
    "v1=100",
    42,
    [{"value": 100}],
    [{"questionId": "v1", "value": "high"}],
    [{"questionId": "v1", "value": True}],
    ["v1"],
])
def test_load_answers_rejects_malformed_payloads(payload):
    with pytest.raises(AnswerFormatError):
        load_answers(payload)


def test_answer_format_error_carries_index():
    with pytest.raises(AnswerFormatError) as exc:
        load_answers([{"questionId": "v1", "value": 0}, {"questionId": "v2"}])
    assert exc.value.index == 1
    assert "Answer #1" in str(exc.value)


def test_answer_to_dict_round_trips():
    answer = Answer("pc1", 75.0, "coaching pilot")
    assert Answer.from_dict(answer.to_dict()) == answer


# -- Completeness --

def test_complete_submission():
    report = check_completeness(uniform_answers(50))
    assert report.is_complete
    assert report.missing_questions == []
    assert report.unknown_questions == []


def test_empty_submission_reports_all_missing():
    report = check_completeness([])
    assert not report.is_complete
    assert report.missing_questions == [q.id for q in QUESTIONS]


def test_unknown_out_of_range_and_off_option_are_reported():
    report = check_completeness([
        Answer("v1", 100),
        Answer("zz9", 50),
        Answer("v2", 150),
        Answer("v3", 60),
    ])
    assert report.unknown_questions == ["zz9"]
    assert report.out_of_range == ["v2"]
    assert report.off_option == ["v3"]
    assert "v1" not in report.missing_questions
    assert "v4" in report.missing_questions


def test_clamp_answers_bounds_values():
    clamped = clamp_answers([Answer("v1", 150), Answer("v2", -10), Answer("v3", 50)])
    assert [a.value for a in clamped] == [100.0, 0.0, 50.0]


@pytest.mark.parametrize("raw", ['{"v1": NaN}', '{"v1": Infinity}', '{"v1": -Infinity}'])
def test_load_answers_rejects_non_finite_values(raw):
    payload = json.loads(raw)
    with pytest.raises(AnswerFormatError):
        load_answers(payload)
