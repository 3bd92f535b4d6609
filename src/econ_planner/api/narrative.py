"""Narrative generator — formatted, plain-English view of a planner result.

Also home to the small formatting helpers shared by the API and the
dashboard: currency, per-period rates, and the feasibility verdict.
"""

from __future__ import annotations

import math
from typing import Any

from econ_planner.config.inputs import PlannerInputs
from econ_planner.models.results import FeasibilityVerdict, FunnelResult

PLACEHOLDER = "—"

ON_TRACK_MESSAGE = "OK (You're on track, protect that time!)"
SHORT_MESSAGE = "SHORT (Add 1 hour or tighten follow-up)"

ROUNDING_NOTE = (
    "Nobody sells 0.67 homes, so every target is rounded up to the next "
    "whole number."
)


def format_currency(value: Any) -> str:
    """Format dollars with no decimals (``$166,666``); non-finite → placeholder."""
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return PLACEHOLDER
    if not math.isfinite(number):
        return PLACEHOLDER
    sign = "-" if number < 0 else ""
    return f"{sign}${abs(number):,.0f}"


def format_rate(value: int, unit: str) -> str:
    """Integer target with a period suffix, e.g. ``100/week``."""
    return f"{value}/{unit}"


def feasibility_verdict(result: FunnelResult) -> FeasibilityVerdict:
    if result.feasible:
        return FeasibilityVerdict(on_track=True, label="OK", message=ON_TRACK_MESSAGE)
    return FeasibilityVerdict(on_track=False, label="SHORT", message=SHORT_MESSAGE)


def format_result(result: FunnelResult) -> dict[str, str]:
    """Display strings for every output, keyed by camelCase field name."""
    return {
        "totalGci": format_currency(result.total_gci),
        "unitsNeeded": str(result.units_needed),
        "signedNeeded": str(result.signed_needed),
        "heldNeeded": str(result.held_needed),
        "appointmentsPerWeek": str(result.appointments_per_week),
        "weeklyConversationGoal": format_rate(result.weekly_conversation_goal, "week"),
        "dailyConversationGoal": format_rate(result.daily_conversation_goal, "day"),
        "feasibilityDailyCap": format_rate(result.feasibility_daily_cap, "day"),
        "feasibility": feasibility_verdict(result).message,
    }


def generate_narrative(inputs: PlannerInputs, result: FunnelResult) -> str:
    """Generate a plain-text report mirroring the planner screen.

    Sections:
      1. Economic stack
      2. Conversion funnel
      3. Take action!
    """
    verdict = feasibility_verdict(result)
    sections: list[str] = []

    # ── 1. Economic stack ──
    sections.append("=" * 60)
    sections.append("ECONOMIC STACK")
    sections.append("=" * 60)
    sections.append(
        f"Net income:          {format_currency(inputs.net_income)}\n"
        f"Operating expenses:  {format_currency(inputs.expenses)}\n"
        f"Cost of sale:        {format_currency(inputs.cos)}\n"
        f"= GCI:               {format_currency(result.total_gci)}\n"
        f"÷ Avg commission:    {format_currency(inputs.avg_commission)}\n"
        f"= Units:             {result.units_needed}"
    )

    # ── 2. Conversion funnel ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("CONVERSION FUNNEL")
    sections.append("=" * 60)
    sections.append(
        f"Units sold needed:         {result.units_needed}\n"
        f"Clients signed needed:     {result.signed_needed}"
        f"  ({inputs.signed_to_closed_pct:g}% close)\n"
        f"Appointments held needed:  {result.held_needed}"
        f"  ({inputs.held_to_signed_pct:g}% sign)\n"
        f"Conversations implied:     {result.conversations_needed}"
        f"  ({inputs.contacts_to_set_pct:g}% set, {inputs.set_to_held_pct:g}% held)"
    )
    sections.append(ROUNDING_NOTE)

    # ── 3. Take action ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("TAKE ACTION!")
    sections.append("=" * 60)
    sections.append(
        f"Working weeks:             {inputs.working_weeks:g}"
        f" ({inputs.vacation_weeks:g} vacation)\n"
        f"Appointments per week:     {result.appointments_per_week}\n"
        f"Weekly conversation goal:  {format_rate(result.weekly_conversation_goal, 'week')}\n"
        f"Daily conversation goal:   {format_rate(result.daily_conversation_goal, 'day')}\n"
        f"Your current capacity:     {format_rate(result.feasibility_daily_cap, 'day')}\n"
        f"Feasibility:               {verdict.message}"
    )

    return "\n".join(sections)
