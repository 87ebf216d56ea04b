"""
Request DTOs for the change enablement API.

Range and shape checks live here, at the HTTP boundary, before any core
function is called.
"""

from typing import Annotated, List, Optional

from pydantic import BaseModel, Field, StrictInt

from app.schemas.change import Classification, RiskTier

RiskScores = List[Annotated[StrictInt, Field(ge=1, le=5)]]


class RiskScoresRequest(BaseModel):
    """Seven dimension scores, each 1-5."""

    scores: RiskScores = Field(
        min_length=7,
        max_length=7,
        description="Scores for the seven risk dimensions, in dimension order.",
    )


class ApprovalPathRequest(BaseModel):
    classification: Classification
    risk_tier: Optional[RiskTier] = Field(
        default=None, description="Required when classification is Normal."
    )


class ChangeAssessmentRequest(BaseModel):
    """Everything needed to run a change through the full pipeline."""

    service_down: bool
    pre_approved: bool
    scores: Optional[RiskScores] = Field(
        default=None,
        min_length=7,
        max_length=7,
        description="Risk scores; required when the change classifies as Normal.",
    )
