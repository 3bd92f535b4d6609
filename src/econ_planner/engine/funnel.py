"""Funnel engine — income goal → units → clients → appointments → conversations.

Pure arithmetic: PlannerInputs → FunnelResult.  Never raises; zero
denominators and zero conversion rates degrade to 0 or the rate floor.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from econ_planner.config.inputs import PlannerInputs
from econ_planner.models.results import FunnelResult

logger = logging.getLogger(__name__)

RATE_FLOOR = 0.0001
"""Smallest conversion rate used as a divisor; keeps every target finite."""


def _rate(pct: float) -> float:
    """Whole-number percentage → conversion rate in [RATE_FLOOR, ...]."""
    return max(RATE_FLOOR, pct / 100.0)


def _ceil(value: float, name: str) -> int:
    """Round a count up.  Counts that overflowed to inf become 0."""
    if not math.isfinite(value):
        logger.warning("%s overflowed to %r; reporting 0", name, value)
        return 0
    return math.ceil(value)


def _round_half_up(value: float, name: str) -> int:
    if not math.isfinite(value):
        logger.warning("%s overflowed to %r; reporting 0", name, value)
        return 0
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


def compute_funnel(inputs: PlannerInputs | Mapping[str, Any]) -> FunnelResult:
    """Derive every downstream target from one set of planner inputs."""
    if not isinstance(inputs, PlannerInputs):
        inputs = PlannerInputs.model_validate(inputs)

    # ── Economic stack ─────────────────────────────────────────────────
    total_gci = inputs.net_income + inputs.expenses + inputs.cos
    raw_units = total_gci / inputs.avg_commission if inputs.avg_commission > 0 else 0.0
    units_needed = _ceil(raw_units, "units_needed")

    # ── Conversion funnel ──────────────────────────────────────────────
    r_units_to_clients = _rate(inputs.signed_to_closed_pct)
    r_clients_to_appts = _rate(inputs.held_to_signed_pct)
    r_sets_to_held = _rate(inputs.set_to_held_pct)
    r_contacts_to_sets = _rate(inputs.contacts_to_set_pct)

    # Partial sales are not actionable: every count rounds UP.
    signed_needed = _ceil(units_needed / r_units_to_clients, "signed_needed")
    held_needed = _ceil(signed_needed / r_clients_to_appts, "held_needed")

    contacts_per_held = 1.0 / (r_contacts_to_sets * r_sets_to_held)
    conversations_needed = _ceil(held_needed * contacts_per_held, "conversations_needed")

    # ── Take action ────────────────────────────────────────────────────
    appointments_per_week = (
        _ceil(held_needed / inputs.working_weeks, "appointments_per_week")
        if inputs.working_weeks > 0
        else 0
    )
    weekly_conversation_goal = _ceil(
        appointments_per_week * inputs.convos_per_appt, "weekly_conversation_goal"
    )
    daily_conversation_goal = (
        _ceil(weekly_conversation_goal / inputs.days_per_week, "daily_conversation_goal")
        if inputs.days_per_week > 0
        else 0
    )

    # Capacity, not a requirement: nearest, no upward bias.
    feasibility_daily_cap = _round_half_up(
        inputs.lead_gen_hours_per_day * inputs.convos_per_hour, "feasibility_daily_cap"
    )

    return FunnelResult(
        total_gci=total_gci,
        units_needed=units_needed,
        signed_needed=signed_needed,
        held_needed=held_needed,
        conversations_needed=conversations_needed,
        appointments_per_week=appointments_per_week,
        weekly_conversation_goal=weekly_conversation_goal,
        daily_conversation_goal=daily_conversation_goal,
        feasibility_daily_cap=feasibility_daily_cap,
        feasible=feasibility_daily_cap >= daily_conversation_goal,
    )


@lru_cache(maxsize=256)
def compute_funnel_cached(inputs: PlannerInputs) -> FunnelResult:
    """Memoized :func:`compute_funnel`, keyed on the (frozen) input record."""
    return compute_funnel(inputs)
