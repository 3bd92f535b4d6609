"""Configuration models — planner inputs and named presets."""

from econ_planner.config.inputs import INPUT_FIELDS, WEEKS_PER_YEAR, PlannerInputs, coerce_number
from econ_planner.config.presets import (
    DEFAULT_PRESET,
    PRESET_LABELS,
    PRESETS,
    empty_inputs,
    get_preset,
)

__all__ = [
    "PlannerInputs",
    "INPUT_FIELDS",
    "WEEKS_PER_YEAR",
    "coerce_number",
    "PRESETS",
    "PRESET_LABELS",
    "DEFAULT_PRESET",
    "get_preset",
    "empty_inputs",
]
