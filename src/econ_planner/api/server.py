"""FastAPI server — JSON access to the economic model planner.

Run with:
    uvicorn econ_planner.api.server:app --reload --port 8000

Or:
    python -m econ_planner.api.server

Endpoints:
    GET  /health          — liveness probe
    GET  /schema          — JSON Schema for planner inputs (camelCase)
    GET  /presets         — preset names and display labels
    GET  /presets/{name}  — one preset's inputs
    POST /compute         — preset and/or partial inputs → targets + verdict
    POST /weeks           — edit vacation/working weeks, keeping the 52-week sum
    POST /sensitivity     — one-at-a-time sweeps → tornado data
    POST /narrative       — plain-text report
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Literal

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from econ_planner.config.inputs import PlannerInputs
from econ_planner.config.presets import PRESET_LABELS, PRESETS, empty_inputs, get_preset
from econ_planner.engine.edits import apply_overrides, set_vacation_weeks, set_working_weeks
from econ_planner.engine.funnel import compute_funnel_cached
from econ_planner.engine.sensitivity import run_sensitivity
from econ_planner.api.narrative import (
    feasibility_verdict,
    format_currency,
    format_result,
    generate_narrative,
)

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Economic Model Planner API",
    version="1.0",
    description=(
        "Reverse-engineer an annual income goal into daily activity targets: "
        "income → units sold → clients signed → appointments held → conversations. "
        "Start from a preset, override any input, and read back the targets "
        "and a feasibility verdict."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class PlanRequest(BaseModel):
    """Request body for /compute, /sensitivity and /narrative."""
    preset: str | None = Field(
        default=None,
        description="Optional starting preset ('rookie' or 'millionaire'). "
                    "Omitted = the empty record (zeros, 52 working weeks).",
    )
    inputs: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial inputs applied on top of the preset. camelCase or "
                    "snake_case keys. Example: {'netIncome': 150000, 'workingWeeks': 46}",
    )


class WeeksRequest(PlanRequest):
    """Request body for /weeks."""
    field: Literal["vacationWeeks", "workingWeeks", "vacation_weeks", "working_weeks"]
    value: Any = Field(description="New week count; clamped to [0, 52].")


class ComputeResponse(BaseModel):
    """Response from /compute."""
    inputs: dict[str, Any]
    result: dict[str, Any]
    verdict: dict[str, Any]
    formatted: dict[str, str]


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _build_inputs(req: PlanRequest) -> PlannerInputs:
    """Start from the preset (or empty record) and apply partial overrides."""
    if req.preset:
        try:
            base = get_preset(req.preset)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=str(exc.args[0])) from exc
    else:
        base = empty_inputs()
    try:
        return apply_overrides(base, req.inputs)
    except KeyError as exc:
        raise HTTPException(status_code=422, detail=str(exc.args[0])) from exc


def _dump(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(by_alias=True, mode="json")


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — welcome message and pointers."""
    return {
        "name": "Economic Model Planner API",
        "version": "1.0",
        "start_here": "GET /presets",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/schema")
def get_schema():
    """JSON Schema for PlannerInputs, keyed by camelCase alias."""
    return PlannerInputs.model_json_schema(by_alias=True)


@app.get("/presets")
def list_presets():
    return {
        "presets": [
            {"name": name, "label": PRESET_LABELS[name]} for name in PRESETS
        ],
    }


@app.get("/presets/{name}")
def get_preset_inputs(name: str):
    try:
        preset = get_preset(name)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc.args[0])) from exc
    return _dump(preset)


@app.post("/compute", response_model=ComputeResponse)
def compute(req: PlanRequest):
    """Compute every target for a preset plus overrides."""
    inputs = _build_inputs(req)
    result = compute_funnel_cached(inputs)
    logger.info(
        "compute preset=%s overrides=%d daily_goal=%d feasible=%s",
        req.preset, len(req.inputs), result.daily_conversation_goal, result.feasible,
    )
    return ComputeResponse(
        inputs=_dump(inputs),
        result=_dump(result),
        verdict=_dump(feasibility_verdict(result)),
        formatted=format_result(result),
    )


@app.post("/weeks")
def edit_weeks(req: WeeksRequest):
    """Edit one of the coupled week fields and return the new record."""
    inputs = _build_inputs(req)
    if req.field in ("vacationWeeks", "vacation_weeks"):
        inputs = set_vacation_weeks(inputs, req.value)
    else:
        inputs = set_working_weeks(inputs, req.value)
    return _dump(inputs)


@app.post("/sensitivity")
def sensitivity(req: PlanRequest):
    """Which assumption moves the daily conversation goal most."""
    inputs = _build_inputs(req)
    result = run_sensitivity(inputs)
    return {
        "base_daily_goal": result.base_daily_goal,
        "base_feasible": result.base_feasible,
        "bars": [asdict(b) for b in result.bars],
    }


@app.post("/narrative")
def narrative(req: PlanRequest):
    """Compute and return only the plain-text report plus headline numbers."""
    inputs = _build_inputs(req)
    result = compute_funnel_cached(inputs)
    # JSON-safe: an overflowed GCI dumps as null
    dumped = _dump(result)
    return {
        "narrative": generate_narrative(inputs, result),
        "headline_metrics": {
            "total_gci": dumped["totalGci"],
            "total_gci_formatted": format_currency(result.total_gci),
            "units_needed": result.units_needed,
            "daily_conversation_goal": result.daily_conversation_goal,
            "feasibility_daily_cap": result.feasibility_daily_cap,
            "feasible": result.feasible,
        },
    }


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    from econ_planner.logging_config import setup_logging

    setup_logging("INFO")
    uvicorn.run(
        "econ_planner.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
