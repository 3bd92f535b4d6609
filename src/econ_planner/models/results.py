"""Result types — the contract between the funnel engine, the API, and the dashboard.

Every field is derived from :class:`~econ_planner.config.inputs.PlannerInputs`;
nothing here is stored or edited by the caller.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FunnelResult(BaseModel):
    """Annual, weekly and daily targets for one set of inputs."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    # --- Economic stack ---
    total_gci: float
    """Gross commission income = net income + expenses + cost of sale."""

    units_needed: int
    """ceil(total_gci / avg_commission); 0 when avg_commission is 0."""

    # --- Conversion funnel ---
    signed_needed: int
    """Clients that must sign to close ``units_needed``."""

    held_needed: int
    """Appointments that must be held to sign ``signed_needed``."""

    conversations_needed: int
    """Annual conversations implied by the contact → set → held chain.
    Diagnostic only: the weekly/daily goals use ``convos_per_appt`` instead."""

    # --- Take action ---
    appointments_per_week: int
    weekly_conversation_goal: int
    daily_conversation_goal: int

    feasibility_daily_cap: int
    """Conversations the schedule allows per day = hours × convos/hour, rounded."""

    feasible: bool
    """True when the daily capacity covers the daily conversation goal."""


class FeasibilityVerdict(BaseModel):
    """One of the two fixed feasibility messages shown to the user."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    on_track: bool
    label: Literal["OK", "SHORT"]
    message: str
