"""
Change classification.

Decision tree:

    Is the service currently down or critically degraded?
      YES -> EMERGENCY
      NO  -> Is this a pre-approved change model?
               YES -> STANDARD
               NO  -> NORMAL (assess risk tier next)
"""

from types import MappingProxyType

from app.schemas.change import Classification

CLASSIFICATION_DESCRIPTIONS = MappingProxyType(
    {
        Classification.STANDARD: (
            "Pre-authorized, low-risk, repeatable change. "
            "No per-instance approval required — pre-approved via change model. "
            "Lead time target: minutes to hours (automated pipeline)."
        ),
        Classification.EMERGENCY: (
            "Must be implemented immediately to restore service or prevent "
            "imminent critical impact. "
            "Expedited ECAB approval required. Full documentation within 48 hours. "
            "A corresponding incident or problem record is mandatory."
        ),
        Classification.NORMAL: (
            "This change requires assessment, authorization, and scheduling. "
            "Score the 7 risk dimensions to determine the risk tier and approval path."
        ),
    }
)


def classify_change(service_down: bool, pre_approved: bool) -> Classification:
    """
    Classify a change from its two yes/no signals.

    An outage wins over everything else, so `pre_approved` is ignored when
    `service_down` is true.
    """
    if service_down:
        return Classification.EMERGENCY
    if pre_approved:
        return Classification.STANDARD
    return Classification.NORMAL


def describe_classification(classification: Classification) -> str:
    """Return the explanatory text shown alongside a classification."""
    return CLASSIFICATION_DESCRIPTIONS[Classification(classification)]
