"""Tests for config/presets.py."""

from __future__ import annotations

import pytest

from econ_planner.config import (
    DEFAULT_PRESET,
    INPUT_FIELDS,
    PRESET_LABELS,
    PRESETS,
    empty_inputs,
    get_preset,
)


def test_exactly_two_presets():
    assert set(PRESETS) == {"rookie", "millionaire"}
    assert set(PRESET_LABELS) == set(PRESETS)
    assert DEFAULT_PRESET in PRESETS


@pytest.mark.parametrize("name", ["rookie", "millionaire"])
def test_presets_fill_a_52_week_year(name: str):
    preset = get_preset(name)
    assert preset.vacation_weeks + preset.working_weeks == 52


def test_rookie_values():
    p = get_preset("rookie")
    assert (p.net_income, p.expenses, p.cos, p.avg_commission) == (100_000, 33_333, 33_333, 10_000)
    assert (p.signed_to_closed_pct, p.held_to_signed_pct, p.set_to_held_pct, p.contacts_to_set_pct) == (75, 75, 80, 8)


def test_millionaire_values():
    p = get_preset("millionaire")
    assert (p.net_income, p.expenses, p.cos, p.avg_commission) == (1_000_000, 750_000, 750_000, 7_150)
    assert (p.signed_to_closed_pct, p.held_to_signed_pct, p.set_to_held_pct, p.contacts_to_set_pct) == (70, 70, 75, 10)


def test_schedules_match():
    r, m = get_preset("rookie"), get_preset("millionaire")
    for name in ("vacation_weeks", "working_weeks", "days_per_week",
                 "lead_gen_hours_per_day", "convos_per_hour", "convos_per_appt"):
        assert getattr(r, name) == getattr(m, name)


def test_lookup_is_case_insensitive():
    assert get_preset(" Rookie ") == PRESETS["rookie"]
    assert get_preset("MILLIONAIRE") == PRESETS["millionaire"]


def test_unknown_preset_lists_choices():
    with pytest.raises(KeyError, match="rookie"):
        get_preset("veteran")


def test_empty_inputs_resets_everything_but_the_year():
    e = empty_inputs()
    assert e.working_weeks == 52
    assert e.vacation_weeks == 0
    for name in INPUT_FIELDS:
        if name != "working_weeks":
            assert getattr(e, name) == 0.0
