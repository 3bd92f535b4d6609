"""Tests for api/narrative.py — formatting helpers and the text report."""

from __future__ import annotations

import pytest

from econ_planner.api.narrative import (
    ON_TRACK_MESSAGE,
    PLACEHOLDER,
    SHORT_MESSAGE,
    feasibility_verdict,
    format_currency,
    format_rate,
    format_result,
    generate_narrative,
)
from econ_planner.config import PlannerInputs
from econ_planner.engine.funnel import compute_funnel


class TestFormatCurrency:

    @pytest.mark.parametrize("value, expected", [
        (166_666, "$166,666"),
        (2_500_000.0, "$2,500,000"),
        (0, "$0"),
        (999.4, "$999"),
        (-1_234, "-$1,234"),
    ])
    def test_whole_dollars(self, value, expected):
        assert format_currency(value) == expected

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan"), None, "abc", 10**400])
    def test_non_finite_shows_placeholder(self, value):
        assert format_currency(value) == PLACEHOLDER


def test_format_rate():
    assert format_rate(100, "week") == "100/week"
    assert format_rate(20, "day") == "20/day"


def test_verdict_on_track(rookie: PlannerInputs):
    verdict = feasibility_verdict(compute_funnel(rookie))
    assert verdict.on_track is True
    assert verdict.label == "OK"
    assert verdict.message == ON_TRACK_MESSAGE


def test_verdict_short(millionaire: PlannerInputs):
    verdict = feasibility_verdict(compute_funnel(millionaire))
    assert verdict.on_track is False
    assert verdict.label == "SHORT"
    assert verdict.message == SHORT_MESSAGE


def test_exactly_two_messages():
    assert ON_TRACK_MESSAGE != SHORT_MESSAGE
    assert ON_TRACK_MESSAGE.startswith("OK")
    assert SHORT_MESSAGE.startswith("SHORT")


def test_format_result(rookie: PlannerInputs):
    formatted = format_result(compute_funnel(rookie))
    assert formatted["totalGci"] == "$166,666"
    assert formatted["unitsNeeded"] == "17"
    assert formatted["weeklyConversationGoal"] == "100/week"
    assert formatted["dailyConversationGoal"] == "20/day"
    assert formatted["feasibilityDailyCap"] == "24/day"
    assert formatted["feasibility"] == ON_TRACK_MESSAGE


def test_narrative_sections(rookie: PlannerInputs):
    text = generate_narrative(rookie, compute_funnel(rookie))
    assert "ECONOMIC STACK" in text
    assert "CONVERSION FUNNEL" in text
    assert "TAKE ACTION!" in text
    assert "$166,666" in text
    assert "20/day" in text
    assert ON_TRACK_MESSAGE in text


def test_narrative_short(millionaire: PlannerInputs):
    text = generate_narrative(millionaire, compute_funnel(millionaire))
    assert "$2,500,000" in text
    assert "300/day" in text
    assert SHORT_MESSAGE in text
