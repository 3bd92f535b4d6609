"""Shared test fixtures — the two presets plus an empty record."""

from __future__ import annotations

import pytest

from econ_planner.config import PlannerInputs, empty_inputs, get_preset


@pytest.fixture
def rookie() -> PlannerInputs:
    return get_preset("rookie")


@pytest.fixture
def millionaire() -> PlannerInputs:
    return get_preset("millionaire")


@pytest.fixture
def empty() -> PlannerInputs:
    return empty_inputs()
