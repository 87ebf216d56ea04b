"""
Risk scoring.

Seven dimensions, each scored 1-5, weighted equally:

    Impact Scope, Complexity, Reversibility, Testing Confidence,
    Deployment History, Timing Sensitivity, Dependency Count

Composite score = sum(scores) / 7, rounded to one decimal place half away
from zero. Tiers:

    1.0 - 2.0  -> Low    (peer review)
    2.1 - 3.5  -> Medium (change authority)
    3.6 - 5.0  -> High   (full CAB)
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence, Tuple

from app.schemas.change import (
    DimensionScore,
    RiskAssessment,
    RiskDimension,
    RiskTier,
)
from app.services.change_enablement.exceptions import InvalidChangeInputError

DIMENSIONS: Tuple[RiskDimension, ...] = tuple(RiskDimension)
MIN_SCORE = 1
MAX_SCORE = 5

# Upper bounds, inclusive.
LOW_MAX = Decimal("2.0")
MEDIUM_MAX = Decimal("3.5")

_ONE_DECIMAL = Decimal("0.1")


def validate_scores(scores: Sequence[int]) -> Tuple[int, ...]:
    """
    Check that `scores` holds exactly one integer in [1, 5] per dimension.

    Raises:
        InvalidChangeInputError: on wrong length, non-integers or out of range values.
    """
    values = tuple(scores)
    if len(values) != len(DIMENSIONS):
        raise InvalidChangeInputError(
            f"Expected {len(DIMENSIONS)} risk scores, got {len(values)}."
        )
    for dimension, value in zip(DIMENSIONS, values):
        # bool is an int subclass; True is not a score.
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidChangeInputError(
                f"{dimension.label} score must be an integer, got {value!r}."
            )
        if not MIN_SCORE <= value <= MAX_SCORE:
            raise InvalidChangeInputError(
                f"{dimension.label} score must be between {MIN_SCORE} and "
                f"{MAX_SCORE}, got {value}."
            )
    return values


def composite_score(scores: Sequence[int]) -> Decimal:
    """Mean of the scores, rounded half away from zero to one decimal place."""
    values = validate_scores(scores)
    mean = Decimal(sum(values)) / Decimal(len(values))
    return mean.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)


def tier_for(composite: Decimal) -> RiskTier:
    if composite <= LOW_MAX:
        return RiskTier.LOW
    if composite <= MEDIUM_MAX:
        return RiskTier.MEDIUM
    return RiskTier.HIGH


def assess_risk(scores: Sequence[int]) -> RiskAssessment:
    """
    Score a change across the seven risk dimensions.

    Args:
        scores: Exactly 7 integers in [1, 5], in `RiskDimension` order.

    Returns:
        RiskAssessment with the rounded composite and its tier.
    """
    composite = composite_score(scores)
    return RiskAssessment(composite=float(composite), tier=tier_for(composite))


def risk_breakdown(scores: Sequence[int]) -> Tuple[DimensionScore, ...]:
    """Pair each score with the dimension it belongs to."""
    return tuple(
        DimensionScore(dimension=dimension, label=dimension.label, score=value)
        for dimension, value in zip(DIMENSIONS, validate_scores(scores))
    )


def format_composite(composite: float) -> str:
    return f"{composite:.1f}"
