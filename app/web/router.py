"""
Web Router - HTMX / Template responses

All routes that return HTML (full pages or partials) live here.
This keeps the API layer clean for pure JSON endpoints.
"""

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Query, Request
from fastapi.templating import Jinja2Templates

from app.schemas.change import ChangeSignals, RiskDimension
from app.services.change_enablement.assessment import evaluate_change
from app.services.change_enablement.risk import format_composite

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))
templates.env.filters["composite"] = format_composite

DEFAULT_SCORE = 3
ScoreQuery = Annotated[int, Query(ge=1, le=5)]


def _form_context(request: Request, **extra) -> dict:
    return {
        "request": request,
        "dimensions": list(RiskDimension),
        "default_score": DEFAULT_SCORE,
        **extra,
    }


# -----------------------------------------------------------------------------
# Page Routes
# -----------------------------------------------------------------------------


@router.get("/")
async def index(request: Request):
    """Change request form."""
    return templates.TemplateResponse(request, "index.html", _form_context(request))


@router.get("/assess")
async def assess(
    request: Request,
    service_down: bool = Query(...),
    pre_approved: bool = Query(...),
    impact_scope: ScoreQuery = DEFAULT_SCORE,
    complexity: ScoreQuery = DEFAULT_SCORE,
    reversibility: ScoreQuery = DEFAULT_SCORE,
    testing_confidence: ScoreQuery = DEFAULT_SCORE,
    deployment_history: ScoreQuery = DEFAULT_SCORE,
    timing_sensitivity: ScoreQuery = DEFAULT_SCORE,
    dependency_count: ScoreQuery = DEFAULT_SCORE,
):
    """Assess a change and render the result."""
    scores = [
        impact_scope,
        complexity,
        reversibility,
        testing_confidence,
        deployment_history,
        timing_sensitivity,
        dependency_count,
    ]
    assessment = evaluate_change(
        ChangeSignals(service_down=service_down, pre_approved=pre_approved), scores
    )
    context = _form_context(request, assessment=assessment, scores=scores)

    # If HTMX request, return the result partial
    if request.headers.get("HX-Request"):
        return templates.TemplateResponse(request, "partials/assessment.html", context)

    # Full page load
    return templates.TemplateResponse(request, "index.html", context)
