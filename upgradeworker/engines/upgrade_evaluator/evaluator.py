"""Evaluation pipeline — validate, score, synthesize, assess.

One call, one verdict: either a complete :class:`UpgradeResponse` or a
single :class:`UpgradeError`. Nothing is kept between calls.
"""

from __future__ import annotations

import structlog

from upgradeworker.core.config import WorkerConfig
from upgradeworker.engines.upgrade_evaluator import compatibility
from upgradeworker.engines.upgrade_evaluator.models import UpgradeRequest, UpgradeResponse
from upgradeworker.engines.upgrade_evaluator.risk import RiskAssessor
from upgradeworker.engines.upgrade_evaluator.synthesizer import synthesize
from upgradeworker.engines.upgrade_evaluator.version import is_valid_version
from upgradeworker.engines.upgrade_evaluator.vulnerability import (
    DEFAULT_NETWORK_ERRORS,
    VulnerabilityOracle,
)
from upgradeworker.errors import ErrorType, UpgradeError, ValidationError

log = structlog.get_logger("upgradeworker.engine")

SUCCESS_MESSAGE = "Upgrade processed successfully"


def validate_request(request: UpgradeRequest) -> None:
    """Raise :class:`ValidationError` for the first defective field.

    Fields decoded from JSON may hold any type, so every field is checked
    for being a string before its content is.
    """
    if not isinstance(request.repository, str):
        raise ValidationError(f"Repository must be a string: {request.repository!r}")
    if not request.repository:
        raise ValidationError("Repository cannot be empty")
    if not isinstance(request.package_name, str):
        raise ValidationError(f"Package name must be a string: {request.package_name!r}")
    if not request.package_name:
        raise ValidationError("Package name cannot be empty")
    if not is_valid_version(request.current_version):
        raise ValidationError(f"Invalid current version: {request.current_version}")
    if not is_valid_version(request.target_version):
        raise ValidationError(f"Invalid target version: {request.target_version}")
    if not isinstance(request.ecosystem, str):
        raise ValidationError(f"Ecosystem must be a string: {request.ecosystem!r}")


class UpgradeEvaluator:
    """Evaluates upgrade requests against a vulnerability oracle."""

    def __init__(
        self,
        config: WorkerConfig | None = None,
        oracle: VulnerabilityOracle | None = None,
        network_errors: tuple[type[BaseException], ...] = DEFAULT_NETWORK_ERRORS,
    ) -> None:
        self._config = config or WorkerConfig()
        self._assessor = RiskAssessor(oracle, network_errors=network_errors)

    @property
    def config(self) -> WorkerConfig:
        return self._config

    def evaluate(self, request: UpgradeRequest) -> UpgradeResponse:
        bound = log.bind(
            repository=request.repository,
            ecosystem=request.ecosystem,
            package=request.package_name,
        )
        try:
            validate_request(request)
        except ValidationError as exc:
            bound.warning("evaluator.rejected", error=exc.message)
            raise

        try:
            score = compatibility.score(request.ecosystem)
            changes = synthesize(request)
            risk = self._assessor.assess(request, changes)
        except UpgradeError:
            raise
        except Exception as exc:
            bound.exception("evaluator.internal_error")
            raise UpgradeError(
                f"Internal error while evaluating {request.package_name}: {exc}",
                ErrorType.INTERNAL,
            ) from exc

        bound.info(
            "evaluator.completed",
            current_version=request.current_version,
            target_version=request.target_version,
            compatibility_score=score,
            risk_level=risk.risk_level.value,
            change_count=len(changes),
        )
        return UpgradeResponse(
            success=True,
            message=SUCCESS_MESSAGE,
            changes=changes,
            compatibility_score=score,
            risk_assessment=risk,
        )


def evaluate(
    request: UpgradeRequest,
    oracle: VulnerabilityOracle | None = None,
) -> UpgradeResponse:
    """Evaluate a single request without building an evaluator.

    This is the standalone entry point, equivalent to
    ``UpgradeEvaluator(oracle=oracle).evaluate(request)``.
    """
    return UpgradeEvaluator(oracle=oracle).evaluate(request)
