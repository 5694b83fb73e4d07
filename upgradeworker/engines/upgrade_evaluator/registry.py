"""Manifest rule registry — map ecosystems to the manifest they pin versions in."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ManifestRule(Protocol):
    """Interface that every ecosystem rule must satisfy."""

    ecosystem: str
    manifest_file: str

    def render(self, package_name: str, version: str) -> str: ...


RULE_REGISTRY: dict[str, ManifestRule] = {}


def register_rule(rule: ManifestRule) -> None:
    """Register a rule instance by its ecosystem key."""
    RULE_REGISTRY[rule.ecosystem] = rule


def get_rule(ecosystem: str) -> ManifestRule | None:
    return RULE_REGISTRY.get(ecosystem)
