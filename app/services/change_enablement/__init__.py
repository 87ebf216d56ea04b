"""
Change enablement: classify a change, score its risk, pick its approval path.
"""

from app.services.change_enablement.classifier import (
    classify_change,
    describe_classification,
)
from app.services.change_enablement.exceptions import InvalidChangeInputError
from app.services.change_enablement.risk import assess_risk, risk_breakdown
from app.services.change_enablement.workflows import resolve_approval_path

__all__ = [
    "classify_change",
    "describe_classification",
    "assess_risk",
    "risk_breakdown",
    "resolve_approval_path",
    "InvalidChangeInputError",
]
