from fastapi import APIRouter

from app.schemas.change import ApprovalPath, ChangeAssessment, ChangeSignals
from app.schemas.change_request import (
    ApprovalPathRequest,
    ChangeAssessmentRequest,
    RiskScoresRequest,
)
from app.services.change_enablement import (
    assess_risk,
    classify_change,
    describe_classification,
    resolve_approval_path,
    risk_breakdown,
)
from app.services.change_enablement.assessment import evaluate_change

router = APIRouter()


@router.post("/classify")
def classify(signals: ChangeSignals):
    """
    Classify a change from its two signals.

    Args:
        signals: Whether the service is down and whether the change is pre-approved.

    Returns:
        The classification and its description.
    """
    classification = classify_change(signals.service_down, signals.pre_approved)
    return {
        "classification": classification,
        "description": describe_classification(classification),
    }


@router.post("/risk")
def risk(request: RiskScoresRequest):
    """Score the seven risk dimensions and return the composite, tier and breakdown."""
    assessment = assess_risk(request.scores)
    return {
        "composite": assessment.composite,
        "tier": assessment.tier,
        "badge": assessment.tier.badge,
        "breakdown": risk_breakdown(request.scores),
    }


@router.post("/approval-path", response_model=ApprovalPath)
def approval_path(request: ApprovalPathRequest):
    """Resolve the approval path; a Normal change must carry its risk tier."""
    return resolve_approval_path(request.classification, request.risk_tier)


@router.post("/assess", response_model=ChangeAssessment)
def assess(request: ChangeAssessmentRequest):
    """Run the whole pipeline: classify, score if Normal, resolve the approval path."""
    signals = ChangeSignals(
        service_down=request.service_down, pre_approved=request.pre_approved
    )
    return evaluate_change(signals, request.scores)
