"""
Tests for the risk level classifier.

Run: pytest tests/test_levels.py -v
"""

from __future__ import annotations

import pytest

from insider_risk_index.scoring import RISK_LEVELS, classify_risk_level, get_risk_level


@pytest.mark.parametrize("score,level", [
    (0, 1),
    (20, 1),
    (20.5, 2),
    (21, 2),
    (40, 2),
    (40.01, 3),
    (60, 3),
    (61, 4),
    (80, 4),
    (80.5, 5),
    (100, 5),
])
def test_level_boundaries(score, level):
    assert classify_risk_level(score).level == level


def test_out_of_range_scores_clamp_to_end_levels():
    assert classify_risk_level(-5).level == 1
    assert classify_risk_level(120).level == 5


def test_levels_are_contiguous_and_named():
    assert [lv.level for lv in RISK_LEVELS] == [1, 2, 3, 4, 5]
    assert RISK_LEVELS[0].name == "Critical Risk"
    assert RISK_LEVELS[-1].name == "Minimal Risk"
    for lower, upper in zip(RISK_LEVELS, RISK_LEVELS[1:]):
        assert upper.low == lower.high + 1


def test_get_risk_level_clamps():
    assert get_risk_level(0).level == 1
    assert get_risk_level(3).name == "Moderate Risk"
    assert get_risk_level(9).level == 5


def test_gap_scores_never_fall_back_to_level_one():
    assert classify_risk_level(80.5).level == 5
    assert classify_risk_level(60.5).level == 4
