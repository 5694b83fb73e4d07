"""Dependency injection — config, evaluator, and stats singletons."""

from __future__ import annotations

from upgradeworker.api.stats import WorkerStats
from upgradeworker.core.config import WorkerConfig
from upgradeworker.engines.upgrade_evaluator.evaluator import UpgradeEvaluator
from upgradeworker.engines.upgrade_evaluator.vulnerability import VulnerabilityOracle

# ---------------------------------------------------------------------------
# Singletons (replaced by init_worker at app startup)
# ---------------------------------------------------------------------------
_config = WorkerConfig()
_evaluator = UpgradeEvaluator(_config)
_stats = WorkerStats()


def init_worker(
    config: WorkerConfig | None = None,
    oracle: VulnerabilityOracle | None = None,
) -> UpgradeEvaluator:
    """Build the evaluator and reset counters. Called once from create_app()."""
    global _config, _evaluator, _stats  # noqa: PLW0603
    _config = config or WorkerConfig.from_env()
    _evaluator = UpgradeEvaluator(_config, oracle)
    _stats = WorkerStats()
    return _evaluator


# ---------------------------------------------------------------------------
# Getters (for Depends())
# ---------------------------------------------------------------------------


def get_config() -> WorkerConfig:
    return _config


def get_evaluator() -> UpgradeEvaluator:
    return _evaluator


def get_stats() -> WorkerStats:
    return _stats
