"""Result models — planner output contracts."""

from econ_planner.models.results import FeasibilityVerdict, FunnelResult

__all__ = [
    "FunnelResult",
    "FeasibilityVerdict",
]
