"""
Change enablement value types.

Pure data models and enums shared by the classifier, the risk scorer and the
workflow resolver. Every model is frozen: values are produced fresh per call
and never mutated afterwards.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Classification(str, Enum):
    """Top-level category of a change."""

    STANDARD = "Standard"
    NORMAL = "Normal"
    EMERGENCY = "Emergency"


class RiskTier(str, Enum):
    """Risk band derived from the composite score."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def badge(self) -> str:
        """Display text, e.g. "Medium Risk"."""
        return f"{self.value} Risk"


class RiskDimension(str, Enum):
    """
    The seven risk dimensions, in scoring order.

    The order only matters for labelling a score sequence; the composite
    weighs every dimension equally.
    """

    IMPACT_SCOPE = "impact_scope"
    COMPLEXITY = "complexity"
    REVERSIBILITY = "reversibility"
    TESTING_CONFIDENCE = "testing_confidence"
    DEPLOYMENT_HISTORY = "deployment_history"
    TIMING_SENSITIVITY = "timing_sensitivity"
    DEPENDENCY_COUNT = "dependency_count"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class ChangeSignals(BaseModel):
    """The two yes/no answers that drive classification."""

    model_config = ConfigDict(frozen=True)

    service_down: bool = Field(
        description="Is the service currently down or critically degraded?"
    )
    pre_approved: bool = Field(description="Is this a pre-approved change model?")


class RiskAssessment(BaseModel):
    """Composite risk score and its tier."""

    model_config = ConfigDict(frozen=True)

    composite: float = Field(
        ge=1.0, le=5.0, description="Mean of the seven scores, one decimal place."
    )
    tier: RiskTier = Field(description="Risk tier derived from the composite.")


class DimensionScore(BaseModel):
    """A single dimension score with its display label."""

    model_config = ConfigDict(frozen=True)

    dimension: RiskDimension
    label: str
    score: int = Field(ge=1, le=5)


class ApprovalPath(BaseModel):
    """Named, ordered sequence of approval workflow steps."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="The name of the approval workflow.")
    steps: Tuple[str, ...] = Field(
        description="Workflow steps in execution/approval order."
    )


class ChangeAssessment(BaseModel):
    """
    Result of running a change through the whole assessment pipeline.

    `risk_assessment` and `breakdown` are only set for Normal changes.
    """

    model_config = ConfigDict(frozen=True)

    classification: Classification
    description: str
    risk_assessment: Optional[RiskAssessment] = None
    breakdown: Tuple[DimensionScore, ...] = ()
    approval_path: ApprovalPath
