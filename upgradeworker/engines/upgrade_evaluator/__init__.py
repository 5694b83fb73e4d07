"""Upgrade evaluator engine — verdicts for proposed dependency upgrades."""

from upgradeworker.engines.upgrade_evaluator.evaluator import UpgradeEvaluator, evaluate
from upgradeworker.engines.upgrade_evaluator.models import (
    Change,
    ChangeType,
    PerformanceImpact,
    RiskAssessment,
    RiskLevel,
    UpgradeRequest,
    UpgradeResponse,
)
from upgradeworker.engines.upgrade_evaluator.vulnerability import (
    PlaceholderOracle,
    VulnerabilityOracle,
)

__all__ = [
    "Change",
    "ChangeType",
    "PerformanceImpact",
    "PlaceholderOracle",
    "RiskAssessment",
    "RiskLevel",
    "UpgradeEvaluator",
    "UpgradeRequest",
    "UpgradeResponse",
    "VulnerabilityOracle",
    "evaluate",
]
