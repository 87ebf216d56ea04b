"""
Schema and DTO package.
"""

from app.schemas.change import (
    ApprovalPath,
    ChangeAssessment,
    ChangeSignals,
    Classification,
    DimensionScore,
    RiskAssessment,
    RiskDimension,
    RiskTier,
)
from app.schemas.change_request import (
    ApprovalPathRequest,
    ChangeAssessmentRequest,
    RiskScoresRequest,
)

__all__ = [
    "ApprovalPath",
    "ChangeAssessment",
    "ChangeSignals",
    "Classification",
    "DimensionScore",
    "RiskAssessment",
    "RiskDimension",
    "RiskTier",
    "ApprovalPathRequest",
    "ChangeAssessmentRequest",
    "RiskScoresRequest",
]
