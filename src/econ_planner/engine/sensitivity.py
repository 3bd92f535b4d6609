"""What-if sweeps — which assumption moves the daily conversation goal most.

Vary one input at a time by a percentage around the base record, recompute
the funnel at each end, and sort the resulting tornado bars by swing width.

Default sweep set:
  - net_income ± 20%
  - avg_commission ± 20%
  - each conversion percentage ± 10%
  - convos_per_appt ± 20%
  - working_weeks ± 10%
"""

from __future__ import annotations

from dataclasses import dataclass, field

from econ_planner.config.inputs import PlannerInputs
from econ_planner.engine.edits import update_input
from econ_planner.engine.funnel import compute_funnel


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    field_name: str
    """PlannerInputs field that was swept."""

    base_value: float
    low_value: float
    high_value: float

    daily_goal_at_low: int
    daily_goal_at_high: int

    feasible_at_low: bool
    feasible_at_high: bool

    delta_daily_goal: int
    """abs(goal_at_high − goal_at_low) — total swing width."""


@dataclass
class SensitivityResult:
    """Complete sweep output."""

    base_daily_goal: int
    base_feasible: bool

    bars: list[TornadoBar] = field(default_factory=list)
    """Tornado bars sorted by delta_daily_goal (descending)."""


PCT_CEILING = 100.0
"""Conversion percentages are swept within 0–100."""

DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Net income", "net_income", -0.20, 0.20),
    ("Average commission", "avg_commission", -0.20, 0.20),
    ("Signed → closed %", "signed_to_closed_pct", -0.10, 0.10),
    ("Held → signed %", "held_to_signed_pct", -0.10, 0.10),
    ("Set → held %", "set_to_held_pct", -0.10, 0.10),
    ("Contacts → set %", "contacts_to_set_pct", -0.10, 0.10),
    ("Conversations per appointment", "convos_per_appt", -0.20, 0.20),
    ("Working weeks", "working_weeks", -0.10, 0.10),
]


def run_sensitivity(
    inputs: PlannerInputs,
    sweeps: list[tuple[str, str, float, float]] | None = None,
) -> SensitivityResult:
    """Sweep each parameter low/high and measure the daily conversation goal.

    Parameters
    ----------
    inputs : PlannerInputs
        Base record.
    sweeps : list[tuple[name, field, low_pct, high_pct]] | None
        Parameter sweeps. None = use DEFAULT_SWEEPS.

    Returns
    -------
    SensitivityResult
        Tornado bars sorted by impact on the daily goal.
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    base = compute_funnel(inputs)
    bars: list[TornadoBar] = []

    for name, field_name, low_pct, high_pct in sweeps:
        base_val = float(getattr(inputs, field_name))

        low_val = base_val * (1 + low_pct)
        high_val = base_val * (1 + high_pct)
        if field_name.endswith("_pct"):
            low_val = min(PCT_CEILING, low_val)
            high_val = min(PCT_CEILING, high_val)

        # update_input keeps the weeks coupling and clamps to the year
        low_inputs = update_input(inputs, field_name, low_val)
        high_inputs = update_input(inputs, field_name, high_val)
        low = compute_funnel(low_inputs)
        high = compute_funnel(high_inputs)

        bars.append(TornadoBar(
            param_name=name,
            field_name=field_name,
            base_value=round(base_val, 4),
            low_value=round(getattr(low_inputs, field_name), 4),
            high_value=round(getattr(high_inputs, field_name), 4),
            daily_goal_at_low=low.daily_conversation_goal,
            daily_goal_at_high=high.daily_conversation_goal,
            feasible_at_low=low.feasible,
            feasible_at_high=high.feasible,
            delta_daily_goal=abs(high.daily_conversation_goal - low.daily_conversation_goal),
        ))

    bars.sort(key=lambda b: b.delta_daily_goal, reverse=True)

    return SensitivityResult(
        base_daily_goal=base.daily_conversation_goal,
        base_feasible=base.feasible,
        bars=bars,
    )
