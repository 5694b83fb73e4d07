"""Compatibility scorer — confidence that an upgrade in an ecosystem is handled well."""

from __future__ import annotations

BASE_CONFIDENCE = 0.8

# How well change synthesis and vulnerability tooling cover each ecosystem.
ECOSYSTEM_FACTORS: dict[str, float] = {
    "npm": 1.0,
    "go": 0.95,
    "cargo": 0.9,
    "pip": 0.85,
}

# Unrecognized ecosystems have no synthesis rule to back the estimate.
DEFAULT_FACTOR = 0.7


def score(ecosystem: str) -> float:
    """Return a compatibility score in ``[0.0, 1.0]`` for *ecosystem*. Never raises."""
    factor = ECOSYSTEM_FACTORS.get(ecosystem, DEFAULT_FACTOR)
    return max(0.0, min(BASE_CONFIDENCE * factor, 1.0))
