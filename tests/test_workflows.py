"""Approval path resolution."""

import pytest

from app.schemas.change import ApprovalPath, Classification, RiskTier
from app.services.change_enablement.exceptions import InvalidChangeInputError
from app.services.change_enablement.workflows import (
    APPROVAL_PATHS,
    EMERGENCY_FLOW,
    STANDARD_FLOW,
    resolve_approval_path,
    workflow_key,
)


class TestStepCounts:
    @pytest.mark.parametrize(
        "classification, tier, count",
        [
            (Classification.STANDARD, None, 6),
            (Classification.EMERGENCY, None, 7),
            (Classification.NORMAL, RiskTier.LOW, 7),
            (Classification.NORMAL, RiskTier.MEDIUM, 8),
            (Classification.NORMAL, RiskTier.HIGH, 10),
        ],
    )
    def test_step_count(self, classification, tier, count):
        assert len(resolve_approval_path(classification, tier).steps) == count

    def test_exactly_five_paths(self):
        assert len(APPROVAL_PATHS) == 5
        assert len({path.title for path in APPROVAL_PATHS.values()}) == 5


class TestStandardAndEmergency:
    @pytest.mark.parametrize("tier", [None, RiskTier.LOW, RiskTier.HIGH])
    def test_standard_ignores_tier(self, tier):
        assert resolve_approval_path(Classification.STANDARD, tier) is STANDARD_FLOW

    @pytest.mark.parametrize("tier", [None, RiskTier.MEDIUM, RiskTier.HIGH])
    def test_emergency_ignores_tier(self, tier):
        assert resolve_approval_path(Classification.EMERGENCY, tier) is EMERGENCY_FLOW

    def test_standard_steps_in_order(self):
        path = resolve_approval_path(Classification.STANDARD)
        assert path.title.startswith("Standard Change Flow")
        assert path.steps[0] == "Requester triggers pipeline"
        assert path.steps[-1] == "Change record logged automatically"

    def test_emergency_ends_with_pir(self):
        path = resolve_approval_path(Classification.EMERGENCY)
        assert path.title.startswith("Emergency Change Flow")
        assert path.steps[0] == "Incident declared"
        assert "Retrospective RFC completion (within 48h)" in path.steps
        assert path.steps[-1] == "Mandatory PIR"


class TestNormal:
    def test_low_risk_is_async_peer_review(self):
        path = resolve_approval_path(Classification.NORMAL, RiskTier.LOW)
        assert "Low Risk" in path.title
        assert "Peer review (1 reviewer, async)" in path.steps

    def test_medium_risk_needs_change_authority(self):
        path = resolve_approval_path(Classification.NORMAL, RiskTier.MEDIUM)
        assert "Medium Risk" in path.title
        assert path.steps.index("Technical review (architect or senior engineer)") < (
            path.steps.index("Change authority approval")
        )
        assert "Validation + brief PIR" in path.steps

    def test_high_risk_goes_to_cab(self):
        path = resolve_approval_path(Classification.NORMAL, RiskTier.HIGH)
        assert "High Risk" in path.title
        assert path.steps[3:6] == (
            "Pre-CAB: documentation completeness check",
            "CAB review (weekly cadence or ad-hoc)",
            "Senior management sign-off",
        )
        assert path.steps[-2:] == ("Validation + full PIR", "Close RFC")

    @pytest.mark.parametrize("tier", list(RiskTier))
    def test_normal_paths_start_with_rfc_and_scoring(self, tier):
        path = resolve_approval_path(Classification.NORMAL, tier)
        assert path.steps[:2] == ("Requester submits RFC", "Automated risk scoring")
        assert path.steps[-1] == "Close RFC"

    def test_accepts_plain_strings(self):
        assert resolve_approval_path("Normal", "Medium") == resolve_approval_path(
            Classification.NORMAL, RiskTier.MEDIUM
        )


class TestInvalidInput:
    def test_normal_without_tier(self):
        with pytest.raises(InvalidChangeInputError, match="risk tier"):
            resolve_approval_path(Classification.NORMAL, None)

    def test_unknown_classification(self):
        with pytest.raises(InvalidChangeInputError):
            resolve_approval_path("Urgent")

    def test_unknown_tier(self):
        with pytest.raises(InvalidChangeInputError):
            resolve_approval_path(Classification.NORMAL, "Extreme")


class TestImmutability:
    def test_paths_are_frozen(self):
        path = resolve_approval_path(Classification.STANDARD)
        with pytest.raises(Exception):
            path.title = "changed"
        assert isinstance(path.steps, tuple)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            APPROVAL_PATHS[(Classification.STANDARD, None)] = ApprovalPath(
                title="x", steps=()
            )

    def test_idempotent(self):
        first = resolve_approval_path(Classification.NORMAL, RiskTier.HIGH)
        second = resolve_approval_path(Classification.NORMAL, RiskTier.HIGH)
        assert first == second

    def test_workflow_key_drops_tier_for_emergency(self):
        assert workflow_key(Classification.EMERGENCY, RiskTier.HIGH) == (
            Classification.EMERGENCY,
            None,
        )
