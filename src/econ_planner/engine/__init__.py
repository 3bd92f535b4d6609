"""Engine — the funnel computation plus immutable editing and what-if sweeps."""

from econ_planner.engine.funnel import RATE_FLOOR, compute_funnel, compute_funnel_cached
from econ_planner.engine.edits import (
    apply_overrides,
    set_vacation_weeks,
    set_working_weeks,
    update_input,
)
from econ_planner.engine.sensitivity import SensitivityResult, TornadoBar, run_sensitivity

__all__ = [
    "RATE_FLOOR",
    "compute_funnel",
    "compute_funnel_cached",
    "update_input",
    "apply_overrides",
    "set_vacation_weeks",
    "set_working_weeks",
    "run_sensitivity",
    "SensitivityResult",
    "TornadoBar",
]
