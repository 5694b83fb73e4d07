"""Tests for the end-to-end evaluation pipeline."""

from __future__ import annotations

import pytest

from upgradeworker.core.config import WorkerConfig
from upgradeworker.engines.upgrade_evaluator import UpgradeEvaluator, evaluate
from upgradeworker.engines.upgrade_evaluator.evaluator import SUCCESS_MESSAGE, validate_request
from upgradeworker.engines.upgrade_evaluator.models import (
    ChangeType,
    PerformanceImpact,
    RiskLevel,
    UpgradeRequest,
)
from upgradeworker.errors import ErrorType, UpgradeError, ValidationError


class _TimeoutOracle:
    def has_known_vulnerability(self, package_name: str, version: str) -> bool:
        raise TimeoutError("feed did not answer")


class _BrokenOracle:
    def has_known_vulnerability(self, package_name: str, version: str) -> bool:
        raise RuntimeError("invariant broken")


class _FeedUnavailable(Exception):
    """Stands in for a client library error such as httpx.HTTPError."""


class _FeedOracle:
    def has_known_vulnerability(self, package_name: str, version: str) -> bool:
        raise _FeedUnavailable("connect timeout")


# ── Validation ───────────────────────────────────────────────────────────


class TestValidation:
    def test_valid_request(self, make_request):
        validate_request(make_request())

    def test_empty_repository(self, make_request):
        with pytest.raises(ValidationError, match="Repository cannot be empty"):
            validate_request(make_request(repository=""))

    def test_empty_package(self, make_request):
        with pytest.raises(ValidationError, match="Package name cannot be empty"):
            validate_request(make_request(package_name=""))

    def test_invalid_current_version(self, make_request):
        with pytest.raises(ValidationError, match="Invalid current version: 1"):
            validate_request(make_request(current_version="1"))

    def test_invalid_target_version(self, make_request):
        with pytest.raises(ValidationError, match=r"Invalid target version: 2\.0\.0\.0"):
            validate_request(make_request(target_version="2.0.0.0"))

    def test_first_failure_wins(self, make_request):
        request = make_request(repository="", package_name="", current_version="bad")
        with pytest.raises(ValidationError) as exc_info:
            validate_request(request)
        assert exc_info.value.message == "Repository cannot be empty"

    def test_current_checked_before_target(self, make_request):
        with pytest.raises(ValidationError, match="current"):
            validate_request(make_request(current_version="a", target_version="b"))

    def test_error_type(self, make_request):
        with pytest.raises(UpgradeError) as exc_info:
            validate_request(make_request(repository=""))
        assert exc_info.value.error_type is ErrorType.VALIDATION
        assert exc_info.value.to_dict() == {
            "error": "Repository cannot be empty",
            "error_type": "Validation",
        }


# ── Scenarios ────────────────────────────────────────────────────────────


class TestEvaluate:
    def test_scenario_major_npm_upgrade(self, make_request):
        response = UpgradeEvaluator().evaluate(make_request())

        assert response.success is True
        assert response.message == SUCCESS_MESSAGE
        assert len(response.changes) == 1
        assert response.changes[0].file_path == "package.json"
        assert response.changes[0].change_type is ChangeType.MODIFY
        assert response.compatibility_score == pytest.approx(0.8)
        risk = response.risk_assessment
        assert risk.breaking_changes is True
        assert risk.risk_level is RiskLevel.HIGH
        assert risk.security_issues == []
        assert risk.performance_impact is PerformanceImpact.NONE

    def test_scenario_vulnerable_package(self, make_request):
        response = evaluate(make_request(package_name="vulnerable-lib"))
        assert response.risk_assessment.risk_level is RiskLevel.CRITICAL
        assert response.risk_assessment.security_issues

    def test_scenario_empty_repository(self, make_request):
        with pytest.raises(UpgradeError) as exc_info:
            evaluate(make_request(repository=""))
        assert exc_info.value.error_type is ErrorType.VALIDATION
        assert "Repository" in exc_info.value.message

    def test_unknown_ecosystem(self, make_request):
        response = evaluate(make_request(ecosystem="maven", target_version="1.1.0"))
        assert response.success is True
        assert response.changes == []
        assert response.compatibility_score == pytest.approx(0.56)
        assert response.risk_assessment.risk_level is RiskLevel.LOW

    def test_metadata_passes_through_untouched(self, make_request):
        metadata = {"pr": {"number": 42, "labels": ["deps"]}, "dry_run": True}
        request = make_request(metadata=metadata)
        evaluate(request)
        assert request.metadata == {"pr": {"number": 42, "labels": ["deps"]}, "dry_run": True}

    def test_same_request_same_verdict(self, make_request):
        evaluator = UpgradeEvaluator()
        request = make_request(ecosystem="cargo")
        assert evaluator.evaluate(request).to_dict() == evaluator.evaluate(request).to_dict()

    def test_to_dict_shape(self, make_request):
        data = evaluate(make_request()).to_dict()
        assert data == {
            "success": True,
            "message": "Upgrade processed successfully",
            "changes": [
                {
                    "file_path": "package.json",
                    "change_type": "Modify",
                    "content": '{"dependencies": {"lodash": "2.0.0"}}',
                    "metadata": {},
                }
            ],
            "compatibility_score": pytest.approx(0.8),
            "risk_assessment": {
                "risk_level": "High",
                "breaking_changes": True,
                "security_issues": [],
                "performance_impact": "None",
            },
        }

    def test_config_defaults(self):
        assert UpgradeEvaluator().config == WorkerConfig()


# ── Collaborator failures ────────────────────────────────────────────────


class TestCollaboratorFailures:
    def test_oracle_timeout_is_network_error(self, make_request):
        evaluator = UpgradeEvaluator(oracle=_TimeoutOracle())
        with pytest.raises(UpgradeError) as exc_info:
            evaluator.evaluate(make_request())
        assert exc_info.value.error_type is ErrorType.NETWORK

    def test_unexpected_failure_is_internal(self, make_request):
        evaluator = UpgradeEvaluator(oracle=_BrokenOracle())
        with pytest.raises(UpgradeError) as exc_info:
            evaluator.evaluate(make_request())
        assert exc_info.value.error_type is ErrorType.INTERNAL
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_client_library_error_is_network_when_registered(self, make_request):
        evaluator = UpgradeEvaluator(oracle=_FeedOracle(), network_errors=(_FeedUnavailable,))
        with pytest.raises(UpgradeError) as exc_info:
            evaluator.evaluate(make_request())
        assert exc_info.value.error_type is ErrorType.NETWORK

    def test_client_library_error_is_internal_when_unregistered(self, make_request):
        with pytest.raises(UpgradeError) as exc_info:
            UpgradeEvaluator(oracle=_FeedOracle()).evaluate(make_request())
        assert exc_info.value.error_type is ErrorType.INTERNAL

    def test_validation_runs_before_oracle(self, make_request):
        evaluator = UpgradeEvaluator(oracle=_TimeoutOracle())
        with pytest.raises(UpgradeError) as exc_info:
            evaluator.evaluate(make_request(package_name=""))
        assert exc_info.value.error_type is ErrorType.VALIDATION


# ── UpgradeRequest ───────────────────────────────────────────────────────


class TestUpgradeRequest:
    def test_value_equality(self, make_request):
        assert make_request() == make_request()
        assert make_request() != make_request(target_version="3.0.0")

    def test_immutable(self, make_request):
        request = make_request()
        with pytest.raises(AttributeError):
            request.repository = "other/repo"  # type: ignore[misc]

    def test_from_dict(self):
        request = UpgradeRequest.from_dict(
            {
                "repository": "test/repo",
                "ecosystem": "cargo",
                "package_name": "serde",
                "current_version": "1.0.0",
                "target_version": "1.0.5",
                "metadata": {"k": [1, 2]},
            }
        )
        assert request.ecosystem == "cargo"
        assert request.metadata == {"k": [1, 2]}

    def test_from_dict_missing_fields_fail_validation(self):
        with pytest.raises(ValidationError, match="Repository"):
            evaluate(UpgradeRequest.from_dict({}))

    def test_metadata_is_copied(self, make_request):
        metadata = {"pr": 42}
        request = make_request(metadata=metadata)
        metadata["pr"] = 43
        metadata["extra"] = True
        assert request.metadata == {"pr": 42}

    def test_metadata_is_read_only(self, make_request):
        request = make_request(metadata={"pr": 42})
        with pytest.raises(TypeError):
            request.metadata["pr"] = 43  # type: ignore[index]

    def test_metadata_must_be_mapping(self):
        with pytest.raises(ValidationError, match="Metadata must be an object"):
            UpgradeRequest.from_dict({"metadata": [1, 2]})

    def test_from_dict_rejects_non_object(self):
        with pytest.raises(ValidationError, match="JSON object"):
            UpgradeRequest.from_dict(["test/repo"])  # type: ignore[arg-type]


# ── Non-string fields from decoded JSON ──────────────────────────────────


def _decoded(**overrides) -> dict:
    data = {
        "repository": "test/repo",
        "ecosystem": "npm",
        "package_name": "lodash",
        "current_version": "1.0.0",
        "target_version": "2.0.0",
    }
    data.update(overrides)
    return data


class TestNonStringFields:
    @pytest.mark.parametrize(
        ("overrides", "message"),
        [
            ({"current_version": None}, "Invalid current version: None"),
            ({"current_version": 1.0}, "Invalid current version: 1.0"),
            ({"target_version": 2}, "Invalid target version: 2"),
            ({"target_version": ["2", "0"]}, "Invalid target version"),
            ({"repository": None}, "Repository must be a string"),
            ({"package_name": 7}, "Package name must be a string"),
            ({"ecosystem": ["npm"]}, "Ecosystem must be a string"),
        ],
    )
    def test_rejected_as_validation_error(self, overrides, message):
        with pytest.raises(UpgradeError) as exc_info:
            evaluate(UpgradeRequest.from_dict(_decoded(**overrides)))
        assert exc_info.value.error_type is ErrorType.VALIDATION
        assert message in exc_info.value.message

    def test_earlier_field_still_wins(self):
        with pytest.raises(ValidationError, match="Repository cannot be empty"):
            evaluate(UpgradeRequest.from_dict(_decoded(repository="", current_version=None)))
