"""Rule for Go go.mod files."""

from __future__ import annotations

from upgradeworker.engines.upgrade_evaluator.registry import register_rule


class GoModRule:
    ecosystem = "go"
    manifest_file = "go.mod"

    def render(self, package_name: str, version: str) -> str:
        # Module versions in go.mod always carry the "v" prefix.
        if not version.startswith("v"):
            version = f"v{version}"
        return f"require {package_name} {version}\n"


register_rule(GoModRule())
