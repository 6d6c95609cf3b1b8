"""
FastAPI adapter for the policy impact engine.

Every response is wrapped in the same envelope:
    {"success": bool, "data" | "error": ..., "metadata": {timestamp, version, cached}}

Run with:
    uvicorn policy_impact.api:app
"""

import logging
import time
import uuid
from datetime import datetime, timezone
from typing import Optional, Tuple

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .app_data import (
    CALCULATION_FORMULAS,
    DATA_SOURCES,
    DEFAULT_IMPLEMENTATION_DATE,
    POLICY_CATEGORIES,
)
from .data.regional import get_regional_profile
from .data.validation import ReferenceDataValidator
from .errors import InvalidScenarioError, RegionNotFoundError, UnknownPolicyError
from .fiscal import calculate_fiscal_impact
from .household import ScenarioComparison, SimulationResult, calculate_policy_impact
from .policies import PolicyScenario
from .preset_handler import list_policies, scenario_from_preset
from .schemas import CompareRequest, FiscalRequest, ScenarioIn, SimulationRequest
from .scenarios import calculate_sensitivity, generate_timeline, model_assumptions

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


app = FastAPI(
    title="Policy Impact API",
    description="Household and fiscal impact of Japanese tax and benefit changes",
    version=API_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# ENVELOPE
# =============================================================================

def _metadata() -> dict:
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": API_VERSION,
        "cached": False,
    }


def _ok(data) -> dict:
    return {"success": True, "data": data, "metadata": _metadata()}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message, "metadata": _metadata()},
    )


@app.exception_handler(RegionNotFoundError)
async def region_not_found_handler(request: Request, exc: RegionNotFoundError):
    return _error(404, str(exc))


@app.exception_handler(UnknownPolicyError)
async def unknown_policy_handler(request: Request, exc: UnknownPolicyError):
    return _error(400, str(exc))


@app.exception_handler(InvalidScenarioError)
async def invalid_scenario_handler(request: Request, exc: InvalidScenarioError):
    return _error(422, str(exc))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    logger.info(f"Rejected {request.method} {request.url.path}: {problems}")
    return _error(422, problems or "Invalid request")


# =============================================================================
# SIMULATION
# =============================================================================

def _resolve_scenario(policy_id: str, scenario_in: Optional[ScenarioIn]) -> PolicyScenario:
    """Requested scenario, or the policy's first preset when none is given."""
    if scenario_in is not None:
        return scenario_in.to_scenario(policy_id)
    return scenario_from_preset(policy_id)


def _run_simulation(request: SimulationRequest) -> Tuple[SimulationResult, dict]:
    started = time.perf_counter()

    scenario = _resolve_scenario(request.policy_id, request.scenario)
    user = request.user_parameters.to_user()

    result = calculate_policy_impact(request.policy_id, user, scenario)

    results = {
        "simple": {
            "monthlyImpact": result.monthly_impact,
            "confidence": result.confidence,
            "implementationDate": request.implementation_date or DEFAULT_IMPLEMENTATION_DATE,
        },
    }

    if request.analysis_level in ("detailed", "expert"):
        results["detailed"] = {
            "scenarios": [s.to_dict() for s in result.scenarios],
            "timeline": [p.to_dict() for p in generate_timeline(result.total_impact)],
            "breakdown": result.breakdown,
        }

    if request.analysis_level == "expert":
        validation = ReferenceDataValidator.validate_all()
        results["expert"] = {
            "assumptions": model_assumptions(result.policy_id),
            "sensitivity": [s.to_dict() for s in calculate_sensitivity(user, scenario)],
            "methodology": {
                "calculationFormula": CALCULATION_FORMULAS[result.policy_id],
                "dataSources": DATA_SOURCES,
                "validationResults": [
                    {"passed": v.passed, "message": v.message} for v in validation
                ],
            },
        }

    payload = {
        "sessionId": uuid.uuid4().hex[:8],
        "policyId": result.policy_id,
        "scenario": {
            "label": scenario.label,
            "rateChange": scenario.rate_change,
            "rateUnit": scenario.rate_unit,
        },
        "results": results,
        "metadata": {
            "calculationTime": (time.perf_counter() - started) * 1000,
        },
    }
    return result, payload


# =============================================================================
# ROUTES
# =============================================================================

@app.get("/policies")
async def get_policies(category: Optional[str] = None):
    """Policy catalog, optionally filtered by category"""
    policies = list_policies(category)
    return _ok({
        "policies": policies,
        "totalCount": len(policies),
        "categories": POLICY_CATEGORIES,
    })


@app.post("/simulate")
async def simulate(request: SimulationRequest):
    """Household impact for one policy scenario"""
    _, payload = _run_simulation(request)
    return _ok(payload)


@app.post("/compare")
async def compare(request: CompareRequest):
    """Several independent simulations side by side"""
    comparison = ScenarioComparison()
    payloads = []
    for item in request.scenarios:
        result, payload = _run_simulation(item)
        comparison.results.append(result)
        comparison.labels.append(payload["scenario"]["label"] or payload["policyId"])
        payloads.append(payload)

    return _ok({
        "comparisons": payloads,
        "analysis": comparison.to_dict()["analysis"],
    })


@app.post("/fiscal")
async def fiscal(request: FiscalRequest):
    """National tax revenue and economic effects"""
    scenario = _resolve_scenario(request.policy_id, request.scenario)
    result = calculate_fiscal_impact(request.policy_id, scenario)
    return _ok(result.to_dict())


@app.get("/regions/{region}")
async def get_region(region: str):
    """Static economic profile for one prefecture"""
    return _ok(get_regional_profile(region).to_dict())
