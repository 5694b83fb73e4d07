"""Rule for pip requirements.txt files."""

from __future__ import annotations

from upgradeworker.engines.upgrade_evaluator.registry import register_rule


class PipRequirementsRule:
    ecosystem = "pip"
    manifest_file = "requirements.txt"

    def render(self, package_name: str, version: str) -> str:
        return f"{package_name}=={version}\n"


register_rule(PipRequirementsRule())
