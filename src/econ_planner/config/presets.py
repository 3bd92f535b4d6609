"""Named input presets — Rookie (RREA) and Millionaire (MREA) defaults."""

from __future__ import annotations

from econ_planner.config.inputs import WEEKS_PER_YEAR, PlannerInputs

ROOKIE = PlannerInputs(
    net_income=100_000,
    expenses=33_333,
    cos=33_333,
    avg_commission=10_000,
    signed_to_closed_pct=75,
    held_to_signed_pct=75,
    set_to_held_pct=80,
    contacts_to_set_pct=8,
    vacation_weeks=4,
    working_weeks=48,
    days_per_week=5,
    lead_gen_hours_per_day=3,
    convos_per_hour=8,
    convos_per_appt=100,
)

MILLIONAIRE = PlannerInputs(
    net_income=1_000_000,
    expenses=750_000,
    cos=750_000,
    avg_commission=7_150,
    signed_to_closed_pct=70,
    held_to_signed_pct=70,
    set_to_held_pct=75,
    contacts_to_set_pct=10,
    vacation_weeks=4,
    working_weeks=48,
    days_per_week=5,
    lead_gen_hours_per_day=3,
    convos_per_hour=8,
    convos_per_appt=100,
)

PRESETS: dict[str, PlannerInputs] = {
    "rookie": ROOKIE,
    "millionaire": MILLIONAIRE,
}

PRESET_LABELS: dict[str, str] = {
    "rookie": "Rookie Defaults (RREA)",
    "millionaire": "Millionaire Defaults (MREA)",
}

DEFAULT_PRESET = "rookie"


def get_preset(name: str) -> PlannerInputs:
    """Look up a preset by name (case-insensitive)."""
    key = name.strip().lower()
    if key not in PRESETS:
        raise KeyError(f"Unknown preset {name!r}; available: {', '.join(PRESETS)}")
    return PRESETS[key]


def empty_inputs() -> PlannerInputs:
    """The record a reset clears to: all zeros, a full working year."""
    return PlannerInputs(vacation_weeks=0, working_weeks=WEEKS_PER_YEAR)
