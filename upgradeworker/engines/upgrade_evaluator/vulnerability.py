"""Vulnerability oracle — the pluggable "is package@version known-vulnerable" check."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import structlog

from upgradeworker.errors import NetworkError

log = structlog.get_logger("upgradeworker.engine")

SENTINEL_VERSION = "0.0.0"

# Exceptions an oracle raises when its data source is unreachable.
DEFAULT_NETWORK_ERRORS: tuple[type[BaseException], ...] = (OSError, TimeoutError)


@runtime_checkable
class VulnerabilityOracle(Protocol):
    """Interface every vulnerability source must satisfy.

    Implementations that do I/O own their timeout and must raise on failure
    rather than answer ``False``. ``OSError`` and ``TimeoutError`` are
    treated as network failures by default. A client library with its own
    hierarchy (``httpx.HTTPError`` for instance) is registered through the
    ``network_errors`` argument of ``UpgradeEvaluator`` or ``RiskAssessor``.
    """

    def has_known_vulnerability(self, package_name: str, version: str) -> bool: ...


class PlaceholderOracle:
    """In-process stand-in until a real feed is plugged in.

    Flags any package whose name contains ``"vulnerable"`` and the
    all-zero sentinel version ``0.0.0``.
    """

    def has_known_vulnerability(self, package_name: str, version: str) -> bool:
        return "vulnerable" in package_name or version == SENTINEL_VERSION


def lookup(
    oracle: VulnerabilityOracle,
    package_name: str,
    version: str,
    network_errors: tuple[type[BaseException], ...] = DEFAULT_NETWORK_ERRORS,
) -> bool:
    """Ask *oracle* about ``package_name@version``.

    Any of *network_errors* surfaces as :class:`NetworkError`, never as a
    negative finding.
    """
    try:
        return oracle.has_known_vulnerability(package_name, version)
    except network_errors as exc:
        log.warning(
            "oracle.lookup_failed",
            package=package_name,
            version=version,
            error=str(exc),
        )
        raise NetworkError(
            f"Vulnerability lookup failed for {package_name}@{version}: {exc}"
        ) from exc
