"""
Graph state for the change assessment pipeline.

Pure graph state, no service-layer imports.
"""

from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, Field

from app.schemas.change import (
    ApprovalPath,
    Classification,
    DimensionScore,
    RiskAssessment,
)


class ChangeAssessmentState(BaseModel):
    """
    State of one change assessment run.

    This is used by LangGraph to carry inputs and node outputs through the
    pipeline; a fresh state is built for every run.
    """

    service_down: bool = Field(description="Is the service currently down?")
    pre_approved: bool = Field(description="Is this a pre-approved change model?")
    scores: Optional[List[Any]] = Field(
        default=None,
        description="Raw risk dimension scores, validated by the risk scorer.",
    )
    classification: Optional[Classification] = Field(
        default=None, description="Set by the classify_change node."
    )
    risk_assessment: Optional[RiskAssessment] = Field(
        default=None, description="Set by the assess_risk node (Normal only)."
    )
    breakdown: Tuple[DimensionScore, ...] = Field(
        default=(), description="Per-dimension scores (Normal only)."
    )
    approval_path: Optional[ApprovalPath] = Field(
        default=None, description="Set by the resolve_approval_path node."
    )
