"""Shared fixtures for upgradeworker tests."""

import pytest

from upgradeworker.engines.upgrade_evaluator.models import UpgradeRequest


@pytest.fixture
def make_request():
    """Factory for requests; defaults to the lodash 1.0.0 → 2.0.0 npm upgrade."""

    def _make(**overrides) -> UpgradeRequest:
        fields = {
            "repository": "test/repo",
            "ecosystem": "npm",
            "package_name": "lodash",
            "current_version": "1.0.0",
            "target_version": "2.0.0",
        }
        fields.update(overrides)
        return UpgradeRequest(**fields)

    return _make
