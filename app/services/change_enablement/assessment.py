"""
Run a change through the full assessment pipeline.
"""

from typing import Optional, Sequence

from app.core.logging import get_logger
from app.schemas.change import ChangeAssessment, ChangeSignals
from app.services.change_enablement.classifier import describe_classification
from app.services.change_enablement.graph import change_assessment_graph
from app.services.change_enablement.state import ChangeAssessmentState

logger = get_logger(__name__)


def evaluate_change(
    signals: ChangeSignals, scores: Optional[Sequence[int]] = None
) -> ChangeAssessment:
    """
    Classify a change, score it when it is Normal, and resolve its approval path.

    Args:
        signals: The service-down / pre-approved answers.
        scores: The seven risk dimension scores. Required for Normal changes,
            ignored otherwise.

    Returns:
        The complete ChangeAssessment.

    Raises:
        InvalidChangeInputError: if a Normal change has missing or invalid scores.
    """
    initial_state = ChangeAssessmentState(
        service_down=signals.service_down,
        pre_approved=signals.pre_approved,
        scores=list(scores) if scores is not None else None,
    )
    result = change_assessment_graph.invoke(initial_state)

    assessment = ChangeAssessment(
        classification=result["classification"],
        description=describe_classification(result["classification"]),
        risk_assessment=result.get("risk_assessment"),
        breakdown=result.get("breakdown", ()),
        approval_path=result["approval_path"],
    )
    logger.info(
        "Change assessed as %s -> %s",
        assessment.classification.value,
        assessment.approval_path.title,
    )
    return assessment
