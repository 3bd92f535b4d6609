"""Immutable editing of planner inputs.

Every edit returns a new :class:`PlannerInputs`; the caller swaps its
current record for the returned one.  Vacation and working weeks are
coupled: setting either clamps it to [0, 52] and sets the other to the
remainder of the year.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from econ_planner.config.inputs import (
    WEEKS_PER_YEAR,
    PlannerInputs,
    coerce_number,
    resolve_field_name,
)

_WEEK_FIELDS = ("vacation_weeks", "working_weeks")


def _replace(inputs: PlannerInputs, **changes: Any) -> PlannerInputs:
    # model_copy(update=...) skips validation; rebuild so coercion still applies.
    return PlannerInputs.model_validate({**inputs.model_dump(), **changes})


def _clamp_weeks(value: Any) -> float:
    return min(WEEKS_PER_YEAR, coerce_number(value))


def set_vacation_weeks(inputs: PlannerInputs, value: Any) -> PlannerInputs:
    """Set vacation weeks; working weeks become ``52 - value``."""
    weeks = _clamp_weeks(value)
    return _replace(inputs, vacation_weeks=weeks, working_weeks=WEEKS_PER_YEAR - weeks)


def set_working_weeks(inputs: PlannerInputs, value: Any) -> PlannerInputs:
    """Set working weeks; vacation weeks become ``52 - value``."""
    weeks = _clamp_weeks(value)
    return _replace(inputs, working_weeks=weeks, vacation_weeks=WEEKS_PER_YEAR - weeks)


def update_input(inputs: PlannerInputs, field: str, value: Any) -> PlannerInputs:
    """Return a copy of ``inputs`` with one field replaced.

    ``field`` may be the snake_case name or the camelCase alias.  Unknown
    names raise ``KeyError``.
    """
    name = resolve_field_name(field)
    if name == "vacation_weeks":
        return set_vacation_weeks(inputs, value)
    if name == "working_weeks":
        return set_working_weeks(inputs, value)
    return _replace(inputs, **{name: value})


def apply_overrides(inputs: PlannerInputs, overrides: Mapping[str, Any]) -> PlannerInputs:
    """Apply several edits in mapping order."""
    for field, value in overrides.items():
        inputs = update_input(inputs, field, value)
    return inputs
