"""Economic Model Planner — Streamlit single-screen dashboard.

Layout: preset / reset buttons → Economic Stack → Conversion Funnel →
Take Action!  Every edit replaces the one ``PlannerInputs`` held in
session state; the targets are recomputed from it on each rerun.

Run with:
    streamlit run src/econ_planner/dashboard/app.py
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from econ_planner.api.narrative import (
    ROUNDING_NOTE,
    feasibility_verdict,
    format_currency,
    format_rate,
)
from econ_planner.config import (
    DEFAULT_PRESET,
    PRESET_LABELS,
    PlannerInputs,
    empty_inputs,
    get_preset,
)
from econ_planner.engine.edits import update_input
from econ_planner.engine.funnel import compute_funnel
from econ_planner.engine.sensitivity import run_sensitivity
from econ_planner.logging_config import setup_logging
from econ_planner.models.results import FunnelResult

setup_logging("WARNING")

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Economic Model Planner", page_icon="📈", layout="centered")

st.markdown("""
<style>
div[data-testid="stMetric"] {
    border: 1px solid #e5e7eb;
    border-radius: 8px;
    padding: 12px 14px 10px;
}
.feasible-ok    { color: #16a34a; font-weight: 600; }
.feasible-short { color: #dc2626; font-weight: 600; }
</style>
""", unsafe_allow_html=True)

_STATE_KEY = "planner_inputs"


def _widget_key(field_name: str) -> str:
    return f"in_{field_name}"


# ---------------------------------------------------------------------------
# Session state: one immutable record, swapped on every edit
# ---------------------------------------------------------------------------

def _load(inputs: PlannerInputs) -> None:
    """Make ``inputs`` current and push its values into the widgets."""
    st.session_state[_STATE_KEY] = inputs
    for name, value in inputs.model_dump().items():
        st.session_state[_widget_key(name)] = float(value)


def _on_edit(field_name: str) -> None:
    new_value = st.session_state[_widget_key(field_name)]
    _load(update_input(st.session_state[_STATE_KEY], field_name, new_value))


if _STATE_KEY not in st.session_state:
    _load(get_preset(DEFAULT_PRESET))


@st.cache_data
def _compute(values: tuple[tuple[str, float], ...]) -> FunnelResult:
    return compute_funnel(dict(values))


def _field(label: str, field_name: str, max_value: float | None = None, step: float = 1.0) -> None:
    """Right-aligned numeric input bound to one PlannerInputs field."""
    left, right = st.columns([3, 1])
    left.markdown(label)
    right.number_input(
        label,
        min_value=0.0,
        max_value=max_value,
        step=step,
        key=_widget_key(field_name),
        on_change=_on_edit,
        args=(field_name,),
        label_visibility="collapsed",
    )


def _row(label: str, value: str, bold: bool = True) -> None:
    left, right = st.columns([3, 1])
    left.markdown(f"**{label}**" if bold else label)
    right.markdown(f"**{value}**" if bold else value)


# ---------------------------------------------------------------------------
# Header + presets
# ---------------------------------------------------------------------------
st.title("Economic Model Planner")
st.caption("Use this tool to reverse-engineer your income goals into daily targets.")

b1, b2, b3 = st.columns(3)
b1.button(PRESET_LABELS["rookie"], on_click=_load, args=(get_preset("rookie"),), use_container_width=True)
b2.button(PRESET_LABELS["millionaire"], on_click=_load, args=(get_preset("millionaire"),), use_container_width=True)
b3.button("Reset", on_click=_load, args=(empty_inputs(),), use_container_width=True)

inputs: PlannerInputs = st.session_state[_STATE_KEY]
calc = _compute(tuple(inputs.model_dump().items()))

# ═══════════════════════════════════════════════════════════════════════════
# Economic stack
# ═══════════════════════════════════════════════════════════════════════════
with st.container(border=True):
    st.subheader("Economic Stack")
    _field("Net Income", "net_income", step=1000.0)
    _field("Operating Expenses", "expenses", step=1000.0)
    _field("Cost of Sale", "cos", step=1000.0)
    st.divider()
    _row("= GCI:", format_currency(calc.total_gci))
    _field("÷ Avg Commission", "avg_commission", step=100.0)
    _row("= Units:", str(calc.units_needed))

# ═══════════════════════════════════════════════════════════════════════════
# Conversion funnel
# ═══════════════════════════════════════════════════════════════════════════
with st.container(border=True):
    st.subheader("Conversion Funnel (Units → Clients → Appointments)")
    _row("Units Sold Needed", str(calc.units_needed))

    st.markdown("**Units Sold → Clients Signed**")
    _field("Conversion Rate (%)", "signed_to_closed_pct", max_value=100.0)
    _row("Clients Signed Needed", str(calc.signed_needed), bold=False)

    st.markdown("**Clients Signed → Appointments Held**")
    _field("Conversion Rate (%)", "held_to_signed_pct", max_value=100.0)
    _row("Appointments Held Needed", str(calc.held_needed), bold=False)

    with st.expander("Contacts → appointments"):
        _field("Contacts → Set (%)", "contacts_to_set_pct", max_value=100.0)
        _field("Set → Held (%)", "set_to_held_pct", max_value=100.0)
        _row("Conversations implied (annual)", f"{calc.conversations_needed:,}", bold=False)

    st.caption(f"_{ROUNDING_NOTE}_")

# ═══════════════════════════════════════════════════════════════════════════
# Take action
# ═══════════════════════════════════════════════════════════════════════════
with st.container(border=True):
    st.subheader("Take Action!")
    _row("Appointments Needed (Annual)", str(calc.held_needed), bold=False)
    _row("Appointments Needed per Week", str(calc.appointments_per_week))
    _field("Vacation Weeks per Year", "vacation_weeks", max_value=52.0)
    _field("Working Weeks per Year", "working_weeks", max_value=52.0)
    _field("Working Days per Week", "days_per_week", max_value=7.0)
    _field("Lead Generation Hours per Day", "lead_gen_hours_per_day", step=0.5)
    _field("Conversations per Hour", "convos_per_hour")
    _field("Conversations to Secure One Appointment", "convos_per_appt")
    _row("Weekly Conversation Goal", format_rate(calc.weekly_conversation_goal, "week"))
    _row("Daily Conversation Goal", format_rate(calc.daily_conversation_goal, "day"))
    _row("Your Current Capacity", format_rate(calc.feasibility_daily_cap, "day"))

    verdict = feasibility_verdict(calc)
    css = "feasible-ok" if verdict.on_track else "feasible-short"
    left, right = st.columns([1, 3])
    left.markdown("Feasibility")
    right.markdown(f'<span class="{css}">{verdict.message}</span>', unsafe_allow_html=True)

# ═══════════════════════════════════════════════════════════════════════════
# Charts
# ═══════════════════════════════════════════════════════════════════════════
with st.expander("Funnel chart"):
    fig = go.Figure(go.Funnel(
        y=["Appointments held", "Clients signed", "Units sold"],
        x=[calc.held_needed, calc.signed_needed, calc.units_needed],
        textinfo="value",
    ))
    fig.update_layout(height=300, margin=dict(l=10, r=10, t=10, b=10))
    st.plotly_chart(fig, use_container_width=True)

with st.expander("What moves the daily goal?"):
    sens = run_sensitivity(inputs)
    df = pd.DataFrame([
        {
            "Parameter": b.param_name,
            "Low": b.low_value,
            "High": b.high_value,
            "Goal @ low": b.daily_goal_at_low,
            "Goal @ high": b.daily_goal_at_high,
            "Swing": b.delta_daily_goal,
        }
        for b in sens.bars
    ])
    st.caption(f"Base daily goal: {format_rate(sens.base_daily_goal, 'day')}")
    if not df.empty:
        fig_t = go.Figure()
        fig_t.add_trace(go.Bar(
            y=df["Parameter"], x=df["Goal @ low"] - sens.base_daily_goal,
            orientation="h", name="Low", marker_color="#0984e3",
        ))
        fig_t.add_trace(go.Bar(
            y=df["Parameter"], x=df["Goal @ high"] - sens.base_daily_goal,
            orientation="h", name="High", marker_color="#e17055",
        ))
        fig_t.update_layout(
            barmode="overlay", height=320,
            xaxis_title="Δ daily conversations vs base",
            yaxis=dict(autorange="reversed"),
            margin=dict(l=10, r=10, t=10, b=10),
        )
        st.plotly_chart(fig_t, use_container_width=True)
    st.dataframe(df, hide_index=True, use_container_width=True)
