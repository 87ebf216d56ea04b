"""
Approval workflows.

The five approval paths of the change enablement policy (sections 4.1-4.5),
keyed by (classification, risk tier). Standard and Emergency changes have a
single path whatever their risk, so their key carries no tier.
"""

from types import MappingProxyType
from typing import Optional, Tuple

from app.schemas.change import ApprovalPath, Classification, RiskTier
from app.services.change_enablement.exceptions import InvalidChangeInputError

WorkflowKey = Tuple[Classification, Optional[RiskTier]]

STANDARD_FLOW = ApprovalPath(
    title="Standard Change Flow (Section 4.1)",
    steps=(
        "Requester triggers pipeline",
        "Automated pre-checks (lint, test, scan)",
        "Auto-approved (change model match verified)",
        "Deploy",
        "Automated validation",
        "Change record logged automatically",
    ),
)

NORMAL_LOW_RISK_FLOW = ApprovalPath(
    title="Normal Change Flow — Low Risk (Section 4.2)",
    steps=(
        "Requester submits RFC",
        "Automated risk scoring",
        "Peer review (1 reviewer, async)",
        "Approved → Scheduled in change calendar",
        "Deploy in approved window",
        "Validation",
        "Close RFC",
    ),
)

NORMAL_MEDIUM_RISK_FLOW = ApprovalPath(
    title="Normal Change Flow — Medium Risk (Section 4.3)",
    steps=(
        "Requester submits RFC",
        "Automated risk scoring",
        "Technical review (architect or senior engineer)",
        "Change authority approval",
        "Scheduled in change calendar (with conflict check)",
        "Deploy with monitoring",
        "Validation + brief PIR",
        "Close RFC",
    ),
)

NORMAL_HIGH_RISK_FLOW = ApprovalPath(
    title="Normal Change Flow — High Risk (Section 4.4)",
    steps=(
        "Requester submits RFC",
        "Automated risk scoring",
        "Technical review + security review",
        "Pre-CAB: documentation completeness check",
        "CAB review (weekly cadence or ad-hoc)",
        "Senior management sign-off",
        "Scheduled with communication plan",
        "Deploy with war-room / bridge call",
        "Validation + full PIR",
        "Close RFC",
    ),
)

EMERGENCY_FLOW = ApprovalPath(
    title="Emergency Change Flow (Section 4.5)",
    steps=(
        "Incident declared",
        "Emergency RFC created (minimal fields)",
        "ECAB approval (phone/chat, 2 approvers minimum)",
        "Implement immediately",
        "Validate service restored",
        "Retrospective RFC completion (within 48h)",
        "Mandatory PIR",
    ),
)

APPROVAL_PATHS = MappingProxyType(
    {
        (Classification.STANDARD, None): STANDARD_FLOW,
        (Classification.NORMAL, RiskTier.LOW): NORMAL_LOW_RISK_FLOW,
        (Classification.NORMAL, RiskTier.MEDIUM): NORMAL_MEDIUM_RISK_FLOW,
        (Classification.NORMAL, RiskTier.HIGH): NORMAL_HIGH_RISK_FLOW,
        (Classification.EMERGENCY, None): EMERGENCY_FLOW,
    }
)


def workflow_key(
    classification: Classification, risk_tier: Optional[RiskTier] = None
) -> WorkflowKey:
    """
    Build the lookup key for a classification and optional risk tier.

    Raises:
        InvalidChangeInputError: if a Normal change has no risk tier.
    """
    try:
        classification = Classification(classification)
        if classification is not Classification.NORMAL:
            return classification, None
        if risk_tier is None:
            raise InvalidChangeInputError(
                "A Normal change needs a risk tier; assess its risk first."
            )
        return classification, RiskTier(risk_tier)
    except InvalidChangeInputError:
        raise
    except ValueError as e:
        raise InvalidChangeInputError(str(e)) from e


def resolve_approval_path(
    classification: Classification, risk_tier: Optional[RiskTier] = None
) -> ApprovalPath:
    """Return the approval path for a classification and (for Normal) risk tier."""
    return APPROVAL_PATHS[workflow_key(classification, risk_tier)]
