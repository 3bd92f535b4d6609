"""Planner inputs — the economic stack, funnel rates, and weekly schedule.

Coercion is the only validation: anything that is not a finite, non-negative
number becomes ``0.0``.  The planner is an interactive tool, so a half-typed
field must never stop the downstream targets from being recomputed.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

WEEKS_PER_YEAR = 52.0


def coerce_number(value: Any) -> float:
    """Normalize a raw field value to a finite, non-negative float.

    ``None``, non-numeric strings, NaN and ±inf map to ``0.0``; numeric
    strings are parsed; negatives clamp to ``0.0``.
    """
    if value is None:
        return 0.0
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug("Non-numeric input %r treated as 0", value)
        return 0.0
    except OverflowError:
        logger.debug("Input %r too large for a float; treated as 0", value)
        return 0.0
    if not math.isfinite(number):
        logger.debug("Non-finite input %r treated as 0", value)
        return 0.0
    return max(0.0, number)


class PlannerInputs(BaseModel):
    """One complete set of planner assumptions.

    Immutable: edits go through :mod:`econ_planner.engine.edits`, which
    always return a new instance.  Fields are accepted under their
    snake_case names or their camelCase aliases (``netIncome``, ...).
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    # --- Economic stack ---
    net_income: float = Field(default=0.0, description="Desired annual take-home income ($)")
    expenses: float = Field(default=0.0, description="Annual operating expenses ($)")
    cos: float = Field(default=0.0, description="Annual cost of sale ($)")
    avg_commission: float = Field(default=0.0, description="Average commission per unit sold ($)")

    # --- Conversion funnel (whole-number percentages, 0–100) ---
    signed_to_closed_pct: float = Field(
        default=0.0,
        description="% of signed clients that close as units sold",
    )
    held_to_signed_pct: float = Field(
        default=0.0,
        description="% of held appointments that result in a signed client",
    )
    set_to_held_pct: float = Field(
        default=0.0,
        description="% of set appointments that are actually held",
    )
    contacts_to_set_pct: float = Field(
        default=0.0,
        description="% of contacts that result in a set appointment",
    )

    # --- Schedule ---
    vacation_weeks: float = Field(
        default=0.0,
        description="Weeks off per year. Complements working_weeks to 52.",
    )
    working_weeks: float = Field(
        default=0.0,
        description="Working weeks per year. Complements vacation_weeks to 52.",
    )
    days_per_week: float = Field(default=0.0, description="Working days per week")
    lead_gen_hours_per_day: float = Field(default=0.0, description="Hours per day spent on lead generation")
    convos_per_hour: float = Field(default=0.0, description="Conversations achievable per hour")
    convos_per_appt: float = Field(
        default=0.0,
        description="Conversations required to secure one appointment",
    )

    @field_validator("*", mode="before")
    @classmethod
    def coerce_numeric(cls, value: Any) -> float:
        return coerce_number(value)


INPUT_FIELDS: tuple[str, ...] = tuple(PlannerInputs.model_fields)
"""Every input field name, in display order."""


def resolve_field_name(name: str) -> str:
    """Map a snake_case name or camelCase alias to the model field name."""
    if name in PlannerInputs.model_fields:
        return name
    for field_name, info in PlannerInputs.model_fields.items():
        if info.alias == name:
            return field_name
    raise KeyError(f"Unknown planner input {name!r}")
