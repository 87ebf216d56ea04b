"""Pipeline nodes for the change assessment graph."""

from app.core.logging import get_logger
from app.schemas.change import Classification
from app.services.change_enablement.classifier import classify_change
from app.services.change_enablement.exceptions import InvalidChangeInputError
from app.services.change_enablement.risk import assess_risk, risk_breakdown
from app.services.change_enablement.state import ChangeAssessmentState
from app.services.change_enablement.workflows import resolve_approval_path

logger = get_logger(__name__)

NODE_CLASSIFY = "classify_change"
NODE_ASSESS_RISK = "assess_risk"
NODE_RESOLVE_PATH = "resolve_approval_path"


def classify_change_node(state: ChangeAssessmentState) -> dict:
    """Classify the change from its two signals."""
    classification = classify_change(state.service_down, state.pre_approved)
    logger.debug(
        "Classified change (service_down=%s, pre_approved=%s) as %s",
        state.service_down,
        state.pre_approved,
        classification.value,
    )
    return {"classification": classification}


def route_after_classification(state: ChangeAssessmentState) -> str:
    """Only Normal changes go through risk scoring."""
    if state.classification == Classification.NORMAL:
        return NODE_ASSESS_RISK
    return NODE_RESOLVE_PATH


def assess_risk_node(state: ChangeAssessmentState) -> dict:
    """Score the seven risk dimensions."""
    if state.scores is None:
        raise InvalidChangeInputError(
            "A Normal change needs risk scores for all 7 dimensions."
        )

    assessment = assess_risk(state.scores)
    logger.debug(
        "Composite risk score %.1f -> %s", assessment.composite, assessment.tier.value
    )
    return {
        "risk_assessment": assessment,
        "breakdown": risk_breakdown(state.scores),
    }


def resolve_approval_path_node(state: ChangeAssessmentState) -> dict:
    """Pick the approval path for the classification and risk tier."""
    risk_tier = state.risk_assessment.tier if state.risk_assessment else None
    path = resolve_approval_path(state.classification, risk_tier)
    logger.debug("Resolved approval path: %s", path.title)
    return {"approval_path": path}
