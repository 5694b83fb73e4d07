"""Risk assessor — fold independent signals into a single risk verdict.

Signals are applied in the fixed order of :data:`DEFAULT_RULES`. A rule may
raise ``risk_level`` but never lower it, so appending a rule cannot undo
what an earlier one decided.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from upgradeworker.engines.upgrade_evaluator.models import (
    Change,
    PerformanceImpact,
    RiskAssessment,
    RiskLevel,
    UpgradeRequest,
)
from upgradeworker.engines.upgrade_evaluator.version import (
    is_major_jump,
    is_valid_version,
    parse_and_validate,
)
from upgradeworker.engines.upgrade_evaluator.vulnerability import (
    DEFAULT_NETWORK_ERRORS,
    PlaceholderOracle,
    VulnerabilityOracle,
    lookup,
)

VOLUME_THRESHOLD = 5
VULNERABILITY_FINDING = "Known security vulnerability detected"


@dataclass(frozen=True)
class RiskContext:
    """Everything a rule may look at."""

    request: UpgradeRequest
    changes: Sequence[Change]
    oracle: VulnerabilityOracle
    network_errors: tuple[type[BaseException], ...] = field(default=DEFAULT_NETWORK_ERRORS)


RiskRule = Callable[[RiskContext, RiskAssessment], None]


def version_delta_rule(ctx: RiskContext, assessment: RiskAssessment) -> None:
    # Unvalidated versions carry no delta signal; validation rejects them upstream.
    if not (
        is_valid_version(ctx.request.current_version)
        and is_valid_version(ctx.request.target_version)
    ):
        return
    current = parse_and_validate(ctx.request.current_version)
    target = parse_and_validate(ctx.request.target_version)
    if is_major_jump(current, target):
        assessment.raise_to(RiskLevel.HIGH)
        assessment.breaking_changes = True


def security_rule(ctx: RiskContext, assessment: RiskAssessment) -> None:
    # A known vulnerability dominates severity regardless of version distance.
    if lookup(
        ctx.oracle,
        ctx.request.package_name,
        ctx.request.target_version,
        ctx.network_errors,
    ):
        assessment.security_issues.append(VULNERABILITY_FINDING)
        assessment.raise_to(RiskLevel.CRITICAL)


def volume_rule(ctx: RiskContext, assessment: RiskAssessment) -> None:
    # Only touches performance_impact, never risk_level.
    if len(ctx.changes) > VOLUME_THRESHOLD:
        assessment.performance_impact = PerformanceImpact.MEDIUM


DEFAULT_RULES: tuple[RiskRule, ...] = (version_delta_rule, security_rule, volume_rule)


class RiskAssessor:
    """Apply an ordered rule list to a request and its synthesized changes."""

    def __init__(
        self,
        oracle: VulnerabilityOracle | None = None,
        rules: Sequence[RiskRule] = DEFAULT_RULES,
        network_errors: tuple[type[BaseException], ...] = DEFAULT_NETWORK_ERRORS,
    ) -> None:
        self._oracle = oracle if oracle is not None else PlaceholderOracle()
        self._rules = tuple(rules)
        self._network_errors = tuple(network_errors)

    @property
    def rules(self) -> tuple[RiskRule, ...]:
        return self._rules

    def assess(self, request: UpgradeRequest, changes: Sequence[Change]) -> RiskAssessment:
        """Fold every rule over a fresh :class:`RiskAssessment`.

        Versions need not be validated first: the delta rule skips a pair
        it cannot parse. An oracle network failure escapes as
        :class:`NetworkError`.
        """
        ctx = RiskContext(
            request=request,
            changes=changes,
            oracle=self._oracle,
            network_errors=self._network_errors,
        )
        assessment = RiskAssessment()
        for rule in self._rules:
            rule(ctx, assessment)
        return assessment


def assess(
    request: UpgradeRequest,
    changes: Sequence[Change],
    oracle: VulnerabilityOracle | None = None,
) -> RiskAssessment:
    """Standalone entry point using :data:`DEFAULT_RULES`."""
    return RiskAssessor(oracle).assess(request, changes)
