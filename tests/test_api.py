"""Tests for the JSON API layer (api/server.py)."""

from __future__ import annotations

from fastapi.testclient import TestClient

from econ_planner.api.server import app


client = TestClient(app)


# ═══════════════════════════════════════════════════════════════════════════
# Discovery endpoints
# ═══════════════════════════════════════════════════════════════════════════

class TestDiscovery:

    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_root(self):
        data = client.get("/").json()
        assert data["name"] == "Economic Model Planner API"

    def test_schema_uses_camel_case(self):
        schema = client.get("/schema").json()
        assert "netIncome" in schema["properties"]
        assert "convosPerAppt" in schema["properties"]
        assert len(schema["properties"]) == 14

    def test_list_presets(self):
        data = client.get("/presets").json()
        names = [p["name"] for p in data["presets"]]
        assert names == ["rookie", "millionaire"]
        assert data["presets"][0]["label"] == "Rookie Defaults (RREA)"

    def test_get_preset(self):
        data = client.get("/presets/millionaire").json()
        assert data["netIncome"] == 1_000_000
        assert data["avgCommission"] == 7_150

    def test_unknown_preset_404(self):
        assert client.get("/presets/veteran").status_code == 404


# ═══════════════════════════════════════════════════════════════════════════
# Computation endpoints
# ═══════════════════════════════════════════════════════════════════════════

class TestCompute:

    def test_rookie(self):
        resp = client.post("/compute", json={"preset": "rookie"})
        assert resp.status_code == 200
        data = resp.json()
        r = data["result"]
        assert r["totalGci"] == 166_666
        assert r["unitsNeeded"] == 17
        assert r["signedNeeded"] == 23
        assert r["heldNeeded"] == 31
        assert r["appointmentsPerWeek"] == 1
        assert r["weeklyConversationGoal"] == 100
        assert r["dailyConversationGoal"] == 20
        assert r["feasibilityDailyCap"] == 24
        assert r["feasible"] is True
        assert data["verdict"]["label"] == "OK"
        assert data["formatted"]["totalGci"] == "$166,666"

    def test_overrides_on_preset(self):
        data = client.post("/compute", json={
            "preset": "rookie",
            "inputs": {"convosPerAppt": 150, "leadGenHoursPerDay": 2},
        }).json()
        # weekly 150, daily 30, capacity 16
        assert data["result"]["dailyConversationGoal"] == 30
        assert data["result"]["feasible"] is False
        assert data["verdict"]["label"] == "SHORT"

    def test_working_weeks_override_keeps_year(self):
        data = client.post("/compute", json={"preset": "rookie", "inputs": {"workingWeeks": 0}}).json()
        assert data["inputs"]["workingWeeks"] == 0
        assert data["inputs"]["vacationWeeks"] == 52
        assert data["result"]["appointmentsPerWeek"] == 0

    def test_no_preset_starts_empty(self):
        data = client.post("/compute", json={}).json()
        assert data["inputs"]["workingWeeks"] == 52
        assert data["result"]["unitsNeeded"] == 0
        assert data["result"]["feasible"] is True

    def test_garbage_inputs_degrade(self):
        data = client.post("/compute", json={
            "preset": "rookie", "inputs": {"avgCommission": "lots", "daysPerWeek": None},
        }).json()
        assert data["result"]["unitsNeeded"] == 0
        assert data["result"]["dailyConversationGoal"] == 0

    def test_unknown_preset_404(self):
        assert client.post("/compute", json={"preset": "veteran"}).status_code == 404

    def test_unknown_input_422(self):
        resp = client.post("/compute", json={"inputs": {"teamSplit": 50}})
        assert resp.status_code == 422

    def test_weeks_edit(self):
        data = client.post("/weeks", json={
            "preset": "rookie", "field": "vacationWeeks", "value": 60,
        }).json()
        assert data["vacationWeeks"] == 52
        assert data["workingWeeks"] == 0

    def test_weeks_edit_working(self):
        data = client.post("/weeks", json={
            "preset": "millionaire", "field": "workingWeeks", "value": "46",
        }).json()
        assert data["workingWeeks"] == 46
        assert data["vacationWeeks"] == 6

    def test_weeks_rejects_other_fields(self):
        resp = client.post("/weeks", json={"field": "netIncome", "value": 1})
        assert resp.status_code == 422

    def test_sensitivity(self):
        data = client.post("/sensitivity", json={"preset": "rookie"}).json()
        assert data["base_daily_goal"] == 20
        assert data["bars"][0]["field_name"] == "convos_per_appt"

    def test_narrative(self):
        data = client.post("/narrative", json={"preset": "millionaire"}).json()
        assert "TAKE ACTION!" in data["narrative"]
        assert data["headline_metrics"]["units_needed"] == 350
        assert data["headline_metrics"]["feasible"] is False

    def test_integer_too_large_for_float(self):
        resp = client.post("/compute", json={"inputs": {"netIncome": 10**400, "avgCommission": 1}})
        assert resp.status_code == 200
        assert resp.json()["result"]["unitsNeeded"] == 0

    def test_overflowing_gci(self):
        body = {"inputs": {"netIncome": 1e308, "expenses": 1e308, "avgCommission": 1}}
        compute_resp = client.post("/compute", json=body)
        assert compute_resp.status_code == 200
        assert compute_resp.json()["formatted"]["totalGci"] == "—"

        narrative_resp = client.post("/narrative", json=body)
        assert narrative_resp.status_code == 200
        metrics = narrative_resp.json()["headline_metrics"]
        assert metrics["total_gci"] is None
        assert metrics["total_gci_formatted"] == "—"
        assert metrics["units_needed"] == 0
